from fastapi import APIRouter

from .document import router as document_router
from .highlight import router as highlight_router
from .page import router as page_router
from .scan_job import router as scan_job_router

router = APIRouter(prefix="/v1")
router.include_router(document_router)
router.include_router(page_router)
router.include_router(highlight_router)
router.include_router(scan_job_router)


@router.get(
    "/health",
    summary="API Health Check",
    description="Simple health check endpoint for monitoring and container orchestration.",
    responses={
        200: {"description": "API is healthy and responding"},
    },
)
async def health_check():
    """Health check endpoint for Docker health checks."""
    return {"status": "healthy", "message": "Textbook Scanner API is running"}
