"""SQLAlchemy models for OCR / extraction scan jobs."""

from enum import Enum
from typing import Any, Optional

from sqlalchemy import JSON, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from ...infrastructure.database.models import CreatedAtMixin
from ...infrastructure.database.session import Base


class JobType(str, Enum):
    OCR = "ocr"
    HIGHLIGHT_EXTRACTION = "highlight_extraction"
    FULL_PIPELINE = "full_pipeline"
    OTHER = "other"


class JobStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


class ScanJob(Base, CreatedAtMixin):
    """Log entry for one OCR or extraction request and its reported outcome.

    The pipeline that runs the job is external; ``input`` and ``output`` are
    stored exactly as reported. Status is written once, at creation.
    """

    __tablename__ = "scan_jobs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, init=False)
    user_id: Mapped[Optional[str]] = mapped_column(String(255), index=True)
    document_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("textbook_documents.id"), default=None, index=True
    )
    page_id: Mapped[Optional[int]] = mapped_column(Integer, ForeignKey("textbook_pages.id"), default=None)
    job_type: Mapped[str] = mapped_column(String(32), default=JobType.FULL_PIPELINE.value)
    input: Mapped[Optional[Any]] = mapped_column(JSON, default=None)
    output: Mapped[Optional[Any]] = mapped_column(JSON, default=None)
    status: Mapped[str] = mapped_column(String(16), default=JobStatus.PENDING.value, index=True)
