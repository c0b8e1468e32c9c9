"""Highlight management service."""

from typing import Any

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from ...infrastructure.database.models import utc_now
from ...infrastructure.logging import get_logger
from ..common.auth import ActingUser, require_user
from ..common.exceptions import HighlightNotFoundError, PageNotFoundError
from ..common.ownership import get_or_404, get_owned_document, insert_and_fetch
from ..page.crud import page_crud
from .crud import highlight_crud
from .models import HighlightType
from .schemas import HighlightDelete, HighlightRead, HighlightResponse, HighlightSave

logger = get_logger(__name__)


class HighlightCreateInternal(BaseModel):
    document_id: int
    content: str
    page_id: int | None = None
    highlight_type: str = HighlightType.KEY_POINT.value
    meta: Any = None


class HighlightService:
    """Service for highlights extracted from a user's documents.

    Saving follows the same full-replace upsert as pages.
    """

    async def save_highlight(
        self,
        highlight_data: HighlightSave,
        user: ActingUser,
        db: AsyncSession,
    ) -> HighlightResponse:
        """Insert a highlight, or replace highlight ``highlight_data.id``.

        Raises:
            DocumentNotFoundError: The document is absent or not owned
            PageNotFoundError: ``page_id`` names no page of this document
            HighlightNotFoundError: ``id`` names no highlight of this document
        """
        user = require_user(user)
        await get_owned_document(db, highlight_data.document_id, user)

        if highlight_data.page_id is not None:
            await get_or_404(
                page_crud, db, PageNotFoundError, id=highlight_data.page_id, document_id=highlight_data.document_id
            )

        values = HighlightCreateInternal(
            document_id=highlight_data.document_id,
            content=highlight_data.content,
            page_id=highlight_data.page_id,
            highlight_type=(highlight_data.highlight_type or HighlightType.KEY_POINT).value,
            meta=highlight_data.meta,
        )

        if highlight_data.id is not None:
            existing = await highlight_crud.get(db=db, id=highlight_data.id)
            if existing is None or existing["document_id"] != highlight_data.document_id:
                raise HighlightNotFoundError()

            replacement = {**values.model_dump(), "created_at": utc_now()}
            await highlight_crud.update(db=db, object=replacement, id=highlight_data.id)
            logger.info(
                "Highlight replaced",
                extra={"highlight_id": highlight_data.id, "document_id": highlight_data.document_id},
            )

            highlight = await get_or_404(highlight_crud, db, HighlightNotFoundError, id=highlight_data.id)
            return HighlightResponse(highlight=HighlightRead.model_validate(highlight))

        created_highlight = await insert_and_fetch(
            highlight_crud, db, values, HighlightRead, HighlightNotFoundError
        )
        logger.info(
            "Highlight created",
            extra={"highlight_id": created_highlight["id"], "document_id": highlight_data.document_id},
        )

        return HighlightResponse(highlight=HighlightRead.model_validate(created_highlight))

    async def delete_highlight(
        self,
        highlight_data: HighlightDelete,
        user: ActingUser,
        db: AsyncSession,
    ) -> HighlightResponse:
        """Delete a highlight of an owned document and return the removed record."""
        user = require_user(user)
        await get_owned_document(db, highlight_data.document_id, user)

        highlight = await get_or_404(
            highlight_crud, db, HighlightNotFoundError, id=highlight_data.id, document_id=highlight_data.document_id
        )
        await highlight_crud.delete(db=db, id=highlight_data.id, document_id=highlight_data.document_id)
        logger.info(
            "Highlight deleted",
            extra={"highlight_id": highlight_data.id, "document_id": highlight_data.document_id},
        )

        return HighlightResponse(highlight=HighlightRead.model_validate(highlight))
