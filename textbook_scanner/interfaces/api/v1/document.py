"""Document actions."""

from fastapi import APIRouter, Depends

from ....modules.document.schemas import (
    DocumentCreate,
    DocumentGet,
    DocumentListResponse,
    DocumentResponse,
    DocumentUpdate,
    DocumentWithPagesResponse,
)
from ....modules.document.services import DocumentService
from ..dependencies import CurrentUser, DbSession, get_document_service

router = APIRouter(prefix="/actions", tags=["Documents"])


@router.post(
    "/createDocument",
    summary="Create Document",
    description="""
    Creates a document owned by the signed-in user.

    - **title**: Required, non-empty
    - **description**, **subject**, **gradeLevel**, **board**: Optional text
    - **sourceType**: `pdf`, `image_set` (default) or `other`
    - **sourceMeta**: Optional JSON stored as-is
    """,
    responses={
        200: {"description": "The created document"},
        401: {"description": "No signed-in user"},
        422: {"description": "Invalid document data"},
    },
)
async def create_document(
    document_data: DocumentCreate,
    user: CurrentUser,
    db: DbSession,
    document_service: DocumentService = Depends(get_document_service),
) -> DocumentResponse:
    """Create a new document."""
    return await document_service.create_document(document_data, user, db)


@router.post(
    "/updateDocument",
    summary="Update Document",
    description="""
    Patches an owned document. Only fields present in the request body are
    written; `updatedAt` is refreshed whenever something changes. A body with
    only `id` returns the stored document unchanged.
    """,
    responses={
        200: {"description": "The current document"},
        404: {"description": "Document not found or not owned"},
    },
)
async def update_document(
    update_data: DocumentUpdate,
    user: CurrentUser,
    db: DbSession,
    document_service: DocumentService = Depends(get_document_service),
) -> DocumentResponse:
    """Update a document."""
    return await document_service.update_document(update_data, user, db)


@router.post("/listDocuments", summary="List Documents")
async def list_documents(
    user: CurrentUser,
    db: DbSession,
    document_service: DocumentService = Depends(get_document_service),
) -> DocumentListResponse:
    """List the signed-in user's documents."""
    return await document_service.list_documents(user, db)


@router.post(
    "/getDocumentWithPages",
    summary="Get Document With Pages",
    responses={404: {"description": "Document not found or not owned"}},
)
async def get_document_with_pages(
    document_query: DocumentGet,
    user: CurrentUser,
    db: DbSession,
    document_service: DocumentService = Depends(get_document_service),
) -> DocumentWithPagesResponse:
    """Get an owned document and all of its pages."""
    return await document_service.get_document_with_pages(document_query, user, db)
