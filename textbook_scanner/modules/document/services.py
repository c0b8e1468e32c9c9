"""Document management service."""

from typing import Any

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from ...infrastructure.database.models import utc_now
from ...infrastructure.logging import get_logger
from ..common.auth import ActingUser, require_user
from ..common.exceptions import DocumentNotFoundError
from ..common.ownership import get_owned_document, insert_and_fetch
from ..page.crud import page_crud
from ..page.schemas import PageRead
from .crud import document_crud
from .models import SourceType
from .schemas import (
    DocumentCreate,
    DocumentGet,
    DocumentListResponse,
    DocumentRead,
    DocumentResponse,
    DocumentUpdate,
    DocumentWithPagesResponse,
)

logger = get_logger(__name__)


class DocumentService:
    """Service for managing a user's textbook documents.

    Documents are patched: ``update_document`` writes only the fields the
    caller supplied. Pages and highlights, by contrast, are saved with
    full-replace semantics by their own services.
    """

    async def create_document(
        self,
        document_data: DocumentCreate,
        user: ActingUser,
        db: AsyncSession,
    ) -> DocumentResponse:
        """Create a document owned by the acting user.

        Args:
            document_data: Document creation data
            user: Acting user, becomes the owner
            db: Database session

        Returns:
            The created document
        """
        user = require_user(user)

        class DocumentCreateInternal(BaseModel):
            owner_id: str
            title: str
            description: str | None = None
            subject: str | None = None
            grade_level: str | None = None
            board: str | None = None
            source_type: str
            source_meta: Any = None

        document_internal = DocumentCreateInternal(
            owner_id=user.id,
            title=document_data.title,
            description=document_data.description,
            subject=document_data.subject,
            grade_level=document_data.grade_level,
            board=document_data.board,
            source_type=(document_data.source_type or SourceType.IMAGE_SET).value,
            source_meta=document_data.source_meta,
        )

        created_document = await insert_and_fetch(
            document_crud, db, document_internal, DocumentRead, DocumentNotFoundError
        )
        logger.info("Document created", extra={"document_id": created_document["id"], "owner_id": user.id})

        return DocumentResponse(document=DocumentRead.model_validate(created_document))

    async def update_document(
        self,
        update_data: DocumentUpdate,
        user: ActingUser,
        db: AsyncSession,
    ) -> DocumentResponse:
        """Patch an owned document with the fields present in ``update_data``.

        Omitted fields are left untouched. When nothing was supplied besides
        the id, the stored record is returned without a write.

        Raises:
            DocumentNotFoundError: The document is absent or owned by someone else
        """
        user = require_user(user)
        existing = await get_owned_document(db, update_data.id, user)

        changes = update_data.model_dump(exclude_unset=True, exclude={"id"})
        if "source_type" in changes:
            changes["source_type"] = SourceType(changes["source_type"]).value

        if not changes:
            return DocumentResponse(document=DocumentRead.model_validate(existing))

        changes["updated_at"] = utc_now()
        await document_crud.update(db=db, object=changes, id=update_data.id, owner_id=user.id)
        logger.info(
            "Document updated",
            extra={"document_id": update_data.id, "fields": sorted(changes)},
        )

        updated = await get_owned_document(db, update_data.id, user)
        return DocumentResponse(document=DocumentRead.model_validate(updated))

    async def list_documents(
        self,
        user: ActingUser,
        db: AsyncSession,
    ) -> DocumentListResponse:
        """List every document owned by the acting user, in storage order."""
        user = require_user(user)

        stmt = await document_crud.select(owner_id=user.id, sort_columns="id", sort_orders="asc")
        result = await db.execute(stmt)

        documents = [DocumentRead.model_validate(dict(row)) for row in result.mappings().all()]
        return DocumentListResponse(documents=documents)

    async def get_document_with_pages(
        self,
        request: DocumentGet,
        user: ActingUser,
        db: AsyncSession,
    ) -> DocumentWithPagesResponse:
        """Get an owned document together with all of its pages.

        Raises:
            DocumentNotFoundError: The document is absent or owned by someone else
        """
        user = require_user(user)
        document = await get_owned_document(db, request.id, user)

        stmt = await page_crud.select(document_id=request.id, sort_columns="id", sort_orders="asc")
        result = await db.execute(stmt)
        pages = [PageRead.model_validate(dict(row)) for row in result.mappings().all()]

        return DocumentWithPagesResponse(document=DocumentRead.model_validate(document), pages=pages)
