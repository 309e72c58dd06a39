"""Shared schema building blocks."""

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field


class RecordDTO(BaseModel):
    """Fields the store assigns to every record."""

    id: str
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    model_config = {"populate_by_name": True}


# Create/update payloads reject unknown keys.
# Fields that may be omitted default to None without allowing an explicit
# null; services only ever read the fields that were set.
PAYLOAD_CONFIG = {"extra": "forbid", "populate_by_name": True}


def _not_bool(value: Any) -> Any:
    if isinstance(value, bool):
        raise ValueError("must be a number")
    return value


# Positive whole number; booleans are not counted as numbers
Count = Annotated[int, BeforeValidator(_not_bool), Field(ge=1)]
