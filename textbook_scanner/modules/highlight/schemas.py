"""Pydantic schemas for highlight entities."""

from typing import Annotated, Optional

from pydantic import Field

from ..common.schemas import CamelModel, CreatedAtSchema, JSONValue
from .models import HighlightType


class HighlightSave(CamelModel):
    """Input for saveHighlight. With ``id`` the highlight is replaced wholesale."""

    id: Optional[int] = None
    document_id: int
    page_id: Optional[int] = None
    highlight_type: Optional[HighlightType] = None
    content: Annotated[str, Field(min_length=1, description="Extracted text")]
    meta: Optional[JSONValue] = None


class HighlightDelete(CamelModel):
    id: int
    document_id: int


class HighlightRead(CreatedAtSchema):
    id: int
    document_id: int
    page_id: Optional[int] = None
    highlight_type: HighlightType
    content: str
    meta: Optional[JSONValue] = None


class HighlightResponse(CamelModel):
    highlight: HighlightRead
