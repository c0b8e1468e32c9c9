"""Highlight actions."""

from fastapi import APIRouter, Depends

from ....modules.highlight.schemas import HighlightDelete, HighlightResponse, HighlightSave
from ....modules.highlight.services import HighlightService
from ..dependencies import CurrentUser, DbSession, get_highlight_service

router = APIRouter(prefix="/actions", tags=["Highlights"])


@router.post(
    "/saveHighlight",
    summary="Save Highlight",
    description="""
    Adds or replaces a highlight on an owned document.

    - **pageId**: Optional, must be a page of the same document
    - **highlightType**: `key_point` (default), `question`, `definition`, `formula` or `other`
    - **content**: Required, non-empty
    - **meta**: Optional JSON stored as-is
    """,
    responses={
        200: {"description": "The stored highlight"},
        404: {"description": "Document, page or highlight not found"},
        422: {"description": "Invalid highlight data"},
    },
)
async def save_highlight(
    highlight_data: HighlightSave,
    user: CurrentUser,
    db: DbSession,
    highlight_service: HighlightService = Depends(get_highlight_service),
) -> HighlightResponse:
    return await highlight_service.save_highlight(highlight_data, user, db)


@router.post(
    "/deleteHighlight",
    summary="Delete Highlight",
    responses={
        200: {"description": "The deleted highlight"},
        404: {"description": "Document or highlight not found"},
    },
)
async def delete_highlight(
    highlight_data: HighlightDelete,
    user: CurrentUser,
    db: DbSession,
    highlight_service: HighlightService = Depends(get_highlight_service),
) -> HighlightResponse:
    return await highlight_service.delete_highlight(highlight_data, user, db)
