"""SQLAlchemy models for extracted highlights."""

from enum import Enum
from typing import Any, Optional

from sqlalchemy import JSON, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ...infrastructure.database.models import CreatedAtMixin
from ...infrastructure.database.session import Base


class HighlightType(str, Enum):
    KEY_POINT = "key_point"
    QUESTION = "question"
    DEFINITION = "definition"
    FORMULA = "formula"
    OTHER = "other"


class Highlight(Base, CreatedAtMixin):
    """A fragment extracted from a document: key point, question, definition, formula.

    ``page_id``, when set, refers to a page of the same document.
    """

    __tablename__ = "textbook_highlights"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, init=False)
    document_id: Mapped[int] = mapped_column(Integer, ForeignKey("textbook_documents.id"), index=True)
    content: Mapped[str] = mapped_column(Text)
    page_id: Mapped[Optional[int]] = mapped_column(Integer, ForeignKey("textbook_pages.id"), default=None, index=True)
    highlight_type: Mapped[str] = mapped_column(String(32), default=HighlightType.KEY_POINT.value)
    meta: Mapped[Optional[Any]] = mapped_column(JSON, default=None)  # MCQ options, formula TeX, etc.
