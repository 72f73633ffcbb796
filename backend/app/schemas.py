from typing import Annotated

from pydantic import BaseModel, Field, field_validator

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

ItemId = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]


class ItemBase(BaseModel):
    name: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def null_name_is_empty(cls, value):
        return "" if value is None else value


class ItemCreate(ItemBase):
    pass


class ItemUpdate(ItemBase):
    pass


class Item(ItemBase):
    id: ItemId


class HealthResponse(BaseModel):
    status: str
    version: str
    items: int
