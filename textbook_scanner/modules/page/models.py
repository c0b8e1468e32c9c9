"""SQLAlchemy models for scanned pages."""

from typing import Any, Optional

from sqlalchemy import JSON, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ...infrastructure.database.models import TimestampMixin
from ...infrastructure.database.session import Base


class Page(Base, TimestampMixin):
    """One scanned page of a document, carrying its OCR output.

    ``image_url`` points at wherever the page image lives (object storage,
    CDN); this service never fetches it.
    """

    __tablename__ = "textbook_pages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, init=False)
    document_id: Mapped[int] = mapped_column(Integer, ForeignKey("textbook_documents.id"), index=True)
    page_number: Mapped[int] = mapped_column(Integer, default=1)
    image_url: Mapped[Optional[str]] = mapped_column(String(2048), default=None)
    ocr_text: Mapped[Optional[str]] = mapped_column(Text, default=None)
    ocr_blocks: Mapped[Optional[Any]] = mapped_column(JSON, default=None)  # layout blocks from the OCR engine
