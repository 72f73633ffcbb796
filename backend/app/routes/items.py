from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Request, Response, status

from app.schemas import INT64_MAX, INT64_MIN, Item, ItemCreate, ItemUpdate
from app.storage import ItemNotFoundError, ItemStore

router = APIRouter(prefix="/api/items", tags=["items"])

ItemIdPath = Annotated[int, Path(ge=INT64_MIN, le=INT64_MAX)]


def get_store(request: Request) -> ItemStore:
    return request.app.state.store


@router.get("/", response_model=list[Item])
def list_items(store: ItemStore = Depends(get_store)):
    return store.list()


@router.post("/", response_model=Item, status_code=status.HTTP_201_CREATED)
def create_item(payload: ItemCreate, store: ItemStore = Depends(get_store)):
    return store.create(payload.name)


@router.get("/{item_id}", response_model=Item)
def get_item(item_id: ItemIdPath, store: ItemStore = Depends(get_store)):
    try:
        return store.get(item_id)
    except ItemNotFoundError as err:
        raise HTTPException(status_code=404, detail="Item not found") from err


@router.put("/{item_id}", response_model=Item)
def update_item(item_id: ItemIdPath, payload: ItemUpdate, store: ItemStore = Depends(get_store)):
    try:
        return store.update(item_id, payload.name)
    except ItemNotFoundError as err:
        raise HTTPException(status_code=404, detail="Item not found") from err


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_item(item_id: ItemIdPath, store: ItemStore = Depends(get_store)):
    try:
        store.delete(item_id)
    except ItemNotFoundError as err:
        raise HTTPException(status_code=404, detail="Item not found") from err
    return Response(status_code=status.HTTP_204_NO_CONTENT)
