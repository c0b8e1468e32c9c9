"""Page actions."""

from fastapi import APIRouter, Depends

from ....modules.page.schemas import PageDelete, PageResponse, PageSave
from ....modules.page.services import PageService
from ..dependencies import CurrentUser, DbSession, get_page_service

router = APIRouter(prefix="/actions", tags=["Pages"])


@router.post(
    "/savePage",
    summary="Save Page",
    description="""
    Adds a page to an owned document, or replaces an existing one when `id`
    is given. Replacing overwrites every field; omitted optional fields are
    cleared and `pageNumber` falls back to 1.
    """,
    responses={
        200: {"description": "The stored page"},
        404: {"description": "Document or page not found"},
        422: {"description": "Invalid page data"},
    },
)
async def save_page(
    page_data: PageSave,
    user: CurrentUser,
    db: DbSession,
    page_service: PageService = Depends(get_page_service),
) -> PageResponse:
    return await page_service.save_page(page_data, user, db)


@router.post(
    "/deletePage",
    summary="Delete Page",
    responses={
        200: {"description": "The deleted page"},
        404: {"description": "Document or page not found"},
    },
)
async def delete_page(
    page_data: PageDelete,
    user: CurrentUser,
    db: DbSession,
    page_service: PageService = Depends(get_page_service),
) -> PageResponse:
    return await page_service.delete_page(page_data, user, db)
