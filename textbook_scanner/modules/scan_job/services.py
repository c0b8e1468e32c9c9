"""Scan job service: records OCR / extraction requests and lists them."""

from typing import Any, Optional

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from ...infrastructure.logging import get_logger
from ..common.auth import ActingUser, require_user
from ..common.exceptions import PageNotFoundError, ResourceNotFoundError
from ..common.ownership import get_or_404, get_owned_document, insert_and_fetch
from ..document.crud import document_crud
from ..page.crud import page_crud
from .crud import scan_job_crud
from .models import JobStatus, JobType
from .schemas import ScanJobCreate, ScanJobFilter, ScanJobListResponse, ScanJobRead, ScanJobResponse

logger = get_logger(__name__)


class ScanJobCreateInternal(BaseModel):
    user_id: str
    document_id: int | None = None
    page_id: int | None = None
    job_type: str
    input: Any = None
    output: Any = None
    status: str


class ScanJobService:
    """Service for scan job records.

    Jobs are only ever created and listed here; whatever runs the pipeline
    reports its status through ``create_scan_job``.

    Note:
        A job's ``page_id`` is checked for existence only. Nothing ties it to
        the job's ``document_id``, so a job may reference a page of another
        document (even one owned by a different user). ``list_scan_jobs``
        scopes by document ownership and requester, not by page.
    """

    async def create_scan_job(
        self,
        job_data: ScanJobCreate,
        user: ActingUser,
        db: AsyncSession,
    ) -> ScanJobResponse:
        """Record a scan job requested by the acting user.

        Raises:
            DocumentNotFoundError: ``document_id`` given but absent or not owned
            PageNotFoundError: ``page_id`` given but no such page exists
        """
        user = require_user(user)

        if job_data.document_id is not None:
            await get_owned_document(db, job_data.document_id, user)

        # TODO: decide whether page_id must belong to document_id and reject mismatches.
        if job_data.page_id is not None:
            await get_or_404(page_crud, db, PageNotFoundError, id=job_data.page_id)

        job_internal = ScanJobCreateInternal(
            user_id=user.id,
            document_id=job_data.document_id,
            page_id=job_data.page_id,
            job_type=(job_data.job_type or JobType.FULL_PIPELINE).value,
            input=job_data.input,
            output=job_data.output,
            status=(job_data.status or JobStatus.PENDING).value,
        )

        created_job = await insert_and_fetch(
            scan_job_crud, db, job_internal, ScanJobRead, ResourceNotFoundError
        )
        logger.info(
            "Scan job recorded",
            extra={
                "job_id": created_job["id"],
                "job_type": created_job["job_type"],
                "status": created_job["status"],
            },
        )

        return ScanJobResponse(job=ScanJobRead.model_validate(created_job))

    async def list_scan_jobs(
        self,
        filters: Optional[ScanJobFilter],
        user: ActingUser,
        db: AsyncSession,
    ) -> ScanJobListResponse:
        """List the acting user's scan jobs, optionally filtered.

        Candidates are every job requested by the user; a job is kept when its
        document (if any) is still owned by the user and it matches each
        supplied filter exactly. Jobs without a document pass the ownership
        check.
        """
        user = require_user(user)
        filters = filters or ScanJobFilter()

        documents_stmt = await document_crud.select(owner_id=user.id)
        documents = await db.execute(documents_stmt)
        allowed_document_ids = {row["id"] for row in documents.mappings().all()}

        jobs_stmt = await scan_job_crud.select(user_id=user.id, sort_columns="id", sort_orders="asc")
        jobs = await db.execute(jobs_stmt)

        return ScanJobListResponse(
            jobs=[
                ScanJobRead.model_validate(dict(job))
                for job in jobs.mappings().all()
                if self._job_matches(job, allowed_document_ids, filters)
            ]
        )

    @staticmethod
    def _job_matches(job: Any, allowed_document_ids: set[int], filters: ScanJobFilter) -> bool:
        if job["document_id"] is not None and job["document_id"] not in allowed_document_ids:
            return False
        if filters.page_id is not None and job["page_id"] != filters.page_id:
            return False
        if filters.status is not None and job["status"] != filters.status.value:
            return False
        if filters.document_id is not None and job["document_id"] != filters.document_id:
            return False
        return True
