"""SQLAlchemy models for textbook documents."""

from enum import Enum
from typing import Any, Optional

from sqlalchemy import JSON, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ...infrastructure.database.models import TimestampMixin
from ...infrastructure.database.session import Base


class SourceType(str, Enum):
    """How the document's original material was supplied."""

    PDF = "pdf"
    IMAGE_SET = "image_set"
    OTHER = "other"


class Document(Base, TimestampMixin):
    """A scanned textbook or chapter, e.g. "Class 11 Physics - Chapter 2".

    Every document has exactly one owner, an identifier issued by the external
    user system. Pages, highlights and scan jobs are reachable only through
    documents the acting user owns.
    """

    __tablename__ = "textbook_documents"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, init=False)
    owner_id: Mapped[str] = mapped_column(String(255), index=True)
    title: Mapped[str] = mapped_column(String(500))
    description: Mapped[Optional[str]] = mapped_column(Text, default=None)

    # Curriculum metadata
    subject: Mapped[Optional[str]] = mapped_column(String(255), default=None)
    grade_level: Mapped[Optional[str]] = mapped_column(String(100), default=None)
    board: Mapped[Optional[str]] = mapped_column(String(255), default=None)  # CBSE, State Board, etc.

    source_type: Mapped[str] = mapped_column(String(32), default=SourceType.IMAGE_SET.value)
    source_meta: Mapped[Optional[Any]] = mapped_column(JSON, default=None)  # file name, page count, etc.
