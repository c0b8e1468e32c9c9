"""Load-or-404 helpers shared by every ownership-guarded operation.

Absent rows and rows the acting user does not own produce the same
NOT_FOUND error, so callers cannot probe for other users' ids.
"""

from typing import Any

from fastcrud import FastCRUD
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from ...infrastructure.logging import get_logger
from ..document.crud import document_crud
from .auth import ActingUser
from .exceptions import DocumentNotFoundError, ResourceNotFoundError

logger = get_logger(__name__)


async def get_or_404(
    crud: FastCRUD,
    db: AsyncSession,
    not_found: type[ResourceNotFoundError],
    **filters: Any,
) -> dict[str, Any]:
    """Fetch the first row matching all ``filters`` or raise ``not_found``.

    Args:
        crud: Gateway for the entity type
        db: Database session
        not_found: NOT_FOUND subclass carrying the entity's message
        **filters: Column equality filters, combined with AND

    Returns:
        The matching row as a dict
    """
    row = await crud.get(db=db, **filters)
    if row is None:
        logger.debug(
            f"{crud.model.__name__} lookup missed",
            extra={"entity": crud.model.__tablename__, "filters": filters},
        )
        raise not_found()
    return row


async def get_owned_document(db: AsyncSession, document_id: int, user: ActingUser) -> dict[str, Any]:
    """Fetch document ``document_id`` if ``user`` owns it, else raise NOT_FOUND."""
    return await get_or_404(document_crud, db, DocumentNotFoundError, id=document_id, owner_id=user.id)


async def insert_and_fetch(
    crud: FastCRUD,
    db: AsyncSession,
    values: BaseModel,
    read_schema: type[BaseModel],
    not_found: type[ResourceNotFoundError],
) -> dict[str, Any]:
    """Insert ``values`` and return the stored row, read back by its new id.

    ``create`` only hands data back when given a ``schema_to_select``; only the
    ``id`` is taken from it so every write path returns a freshly read row.
    """
    created = await crud.create(db=db, object=values, schema_to_select=read_schema)
    return await get_or_404(crud, db, not_found, id=created["id"])
