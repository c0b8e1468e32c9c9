"""Scan job actions."""

from typing import Optional

from fastapi import APIRouter, Body, Depends

from ....modules.scan_job.schemas import ScanJobCreate, ScanJobFilter, ScanJobListResponse, ScanJobResponse
from ....modules.scan_job.services import ScanJobService
from ..dependencies import CurrentUser, DbSession, get_scan_job_service

router = APIRouter(prefix="/actions", tags=["Scan Jobs"])


@router.post(
    "/createScanJob",
    summary="Record Scan Job",
    description="""
    Records an OCR or extraction request. `jobType` defaults to
    `full_pipeline` and `status` to `pending`. `input` and `output` are
    stored as-is.
    """,
    responses={
        200: {"description": "The recorded job"},
        404: {"description": "Document or page not found"},
    },
)
async def create_scan_job(
    job_data: ScanJobCreate,
    user: CurrentUser,
    db: DbSession,
    scan_job_service: ScanJobService = Depends(get_scan_job_service),
) -> ScanJobResponse:
    return await scan_job_service.create_scan_job(job_data, user, db)


@router.post(
    "/listScanJobs",
    summary="List Scan Jobs",
    description="Lists the signed-in user's jobs, filtered by `documentId`, `pageId` and `status` when given.",
)
async def list_scan_jobs(
    user: CurrentUser,
    db: DbSession,
    filters: Optional[ScanJobFilter] = Body(default=None),
    scan_job_service: ScanJobService = Depends(get_scan_job_service),
) -> ScanJobListResponse:
    return await scan_job_service.list_scan_jobs(filters, user, db)
