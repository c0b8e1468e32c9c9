"""Shared pydantic schema bases."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Opaque structured payload: object, array or scalar. Never interpreted here.
JSONValue = Any


class CamelModel(BaseModel):
    """Base for wire schemas: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class CreatedAtSchema(CamelModel):
    created_at: datetime = Field(description="When the record was created")


class TimestampSchema(CreatedAtSchema):
    updated_at: Optional[datetime] = Field(default=None, description="When the record was last written")
