"""Page management service."""

from typing import Any

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from ...infrastructure.database.models import utc_now
from ...infrastructure.logging import get_logger
from ..common.auth import ActingUser, require_user
from ..common.exceptions import PageNotFoundError
from ..common.ownership import get_or_404, get_owned_document, insert_and_fetch
from .crud import page_crud
from .schemas import PageDelete, PageRead, PageResponse, PageSave

logger = get_logger(__name__)


class PageCreateInternal(BaseModel):
    document_id: int
    page_number: int = 1
    image_url: str | None = None
    ocr_text: str | None = None
    ocr_blocks: Any = None


class PageService:
    """Service for the scanned pages of a user's documents.

    ``save_page`` is an upsert keyed by page id with full-replace semantics:
    every writable field is overwritten, so omitted optional fields become
    null on an existing page.
    """

    async def save_page(
        self,
        page_data: PageSave,
        user: ActingUser,
        db: AsyncSession,
    ) -> PageResponse:
        """Insert a page, or replace page ``page_data.id`` of the same document.

        Args:
            page_data: Page values; ``id`` selects replace over insert
            user: Acting user, must own ``page_data.document_id``
            db: Database session

        Returns:
            The stored page

        Raises:
            DocumentNotFoundError: The document is absent or not owned
            PageNotFoundError: ``id`` names no page of this document
        """
        user = require_user(user)
        await get_owned_document(db, page_data.document_id, user)

        values = PageCreateInternal(
            document_id=page_data.document_id,
            page_number=page_data.page_number or 1,
            image_url=page_data.image_url,
            ocr_text=page_data.ocr_text,
            ocr_blocks=page_data.ocr_blocks,
        )

        if page_data.id is not None:
            existing = await page_crud.get(db=db, id=page_data.id)
            if existing is None or existing["document_id"] != page_data.document_id:
                raise PageNotFoundError()

            now = utc_now()
            replacement = {**values.model_dump(), "created_at": now, "updated_at": now}
            await page_crud.update(db=db, object=replacement, id=page_data.id)
            logger.info("Page replaced", extra={"page_id": page_data.id, "document_id": page_data.document_id})

            page = await get_or_404(page_crud, db, PageNotFoundError, id=page_data.id)
            return PageResponse(page=PageRead.model_validate(page))

        created_page = await insert_and_fetch(page_crud, db, values, PageRead, PageNotFoundError)
        logger.info("Page created", extra={"page_id": created_page["id"], "document_id": page_data.document_id})

        return PageResponse(page=PageRead.model_validate(created_page))

    async def delete_page(
        self,
        page_data: PageDelete,
        user: ActingUser,
        db: AsyncSession,
    ) -> PageResponse:
        """Delete a page of an owned document and return the removed record.

        Raises:
            DocumentNotFoundError: The document is absent or not owned
            PageNotFoundError: No page with this id under this document
        """
        user = require_user(user)
        await get_owned_document(db, page_data.document_id, user)

        page = await get_or_404(page_crud, db, PageNotFoundError, id=page_data.id, document_id=page_data.document_id)
        await page_crud.delete(db=db, id=page_data.id, document_id=page_data.document_id)
        logger.info("Page deleted", extra={"page_id": page_data.id, "document_id": page_data.document_id})

        return PageResponse(page=PageRead.model_validate(page))
