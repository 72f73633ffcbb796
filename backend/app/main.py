import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.routes.items import router as items_router
from app.schemas import HealthResponse
from app.storage import ItemNotFoundError, ItemStore

APP_VERSION = "0.1.1"

logger = logging.getLogger(__name__)


async def bad_request_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"detail": "bad request", "errors": jsonable_encoder(exc.errors())},
    )


async def item_not_found_handler(request: Request, exc: ItemNotFoundError):
    return JSONResponse(status_code=404, content={"detail": "Item not found"})


def create_app(store: Optional[ItemStore] = None) -> FastAPI:
    app = FastAPI(title="Items API", version=APP_VERSION)
    app.state.store = store if store is not None else ItemStore()

    app.add_exception_handler(RequestValidationError, bad_request_handler)
    app.add_exception_handler(ItemNotFoundError, item_not_found_handler)
    app.include_router(items_router)

    @app.get("/api/health", response_model=HealthResponse)
    def health():
        return {"status": "ok", "version": APP_VERSION, "items": app.state.store.count()}

    logger.info("items api %s ready (%d items)", APP_VERSION, app.state.store.count())
    return app
