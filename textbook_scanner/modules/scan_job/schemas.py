"""Pydantic schemas for scan job entities."""

from typing import List, Optional

from ..common.schemas import CamelModel, CreatedAtSchema, JSONValue
from .models import JobStatus, JobType


class ScanJobCreate(CamelModel):
    """Input for createScanJob."""

    document_id: Optional[int] = None
    page_id: Optional[int] = None
    job_type: Optional[JobType] = None
    input: Optional[JSONValue] = None
    output: Optional[JSONValue] = None
    status: Optional[JobStatus] = None


class ScanJobFilter(CamelModel):
    """Input for listScanJobs. Every supplied field must match exactly."""

    document_id: Optional[int] = None
    page_id: Optional[int] = None
    status: Optional[JobStatus] = None


class ScanJobRead(CreatedAtSchema):
    id: int
    user_id: Optional[str] = None
    document_id: Optional[int] = None
    page_id: Optional[int] = None
    job_type: JobType
    input: Optional[JSONValue] = None
    output: Optional[JSONValue] = None
    status: JobStatus


class ScanJobResponse(CamelModel):
    job: ScanJobRead


class ScanJobListResponse(CamelModel):
    jobs: List[ScanJobRead]
