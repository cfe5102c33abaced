"""Shared schema configuration and response envelopes."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Wire models use camelCase keys; snake_case input is accepted too."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class DataResponse(CamelModel, Generic[T]):
    success: bool = True
    data: T


class MessageResponse(CamelModel):
    success: bool = True
    message: str
