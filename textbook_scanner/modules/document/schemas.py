"""Pydantic schemas for document entities."""

from typing import Annotated, List, Optional

from pydantic import Field, field_validator

from ..common.schemas import CamelModel, JSONValue, TimestampSchema
from ..page.schemas import PageRead
from .models import SourceType

Title = Annotated[str, Field(min_length=1, max_length=500, description="Document title")]


class DocumentBase(CamelModel):
    """Base schema for document data."""

    title: Title
    description: Optional[str] = None
    subject: Optional[str] = None
    grade_level: Optional[str] = None
    board: Optional[str] = Field(default=None, description="Examination board, e.g. CBSE")
    source_meta: Optional[JSONValue] = Field(default=None, description="Opaque metadata about the source file")


class DocumentCreate(DocumentBase):
    """Input for createDocument."""

    source_type: Optional[SourceType] = None


class DocumentUpdate(CamelModel):
    """Input for updateDocument. Only fields present in the request are applied."""

    id: int
    title: Optional[Title] = None
    description: Optional[str] = None
    subject: Optional[str] = None
    grade_level: Optional[str] = None
    board: Optional[str] = None
    source_type: Optional[SourceType] = None
    source_meta: Optional[JSONValue] = None

    @field_validator("title", "description", "subject", "grade_level", "board", "source_type", mode="before")
    @classmethod
    def reject_null(cls, value):
        # Omit a field to leave it unchanged; only sourceMeta can be cleared with null.
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class DocumentGet(CamelModel):
    """Input for getDocumentWithPages."""

    id: int


class DocumentRead(TimestampSchema, DocumentBase):
    """Schema for reading document data."""

    id: int
    owner_id: str
    source_type: SourceType


class DocumentResponse(CamelModel):
    document: DocumentRead


class DocumentListResponse(CamelModel):
    documents: List[DocumentRead]


class DocumentWithPagesResponse(CamelModel):
    document: DocumentRead
    pages: List[PageRead]
