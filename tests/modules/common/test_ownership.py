"""Tests for the acting-user guard and the load-owned-or-404 helpers."""

import pytest
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from textbook_scanner.modules.common.auth import ActingUser, require_user
from textbook_scanner.modules.common.exceptions import (
    DocumentNotFoundError,
    PageNotFoundError,
    ResourceNotFoundError,
    UnauthorizedError,
)
from textbook_scanner.modules.common.ownership import get_or_404, get_owned_document
from textbook_scanner.modules.page.crud import page_crud


def test_require_user_passes_user_through(owner: ActingUser):
    assert require_user(owner) is owner


def test_require_user_without_session():
    with pytest.raises(UnauthorizedError) as exc_info:
        require_user(None)

    assert exc_info.value.code == "UNAUTHORIZED"
    assert exc_info.value.message == "You must be signed in to perform this action."


def test_acting_user_rejects_blank_id():
    with pytest.raises(ValidationError):
        ActingUser(id="   ")


@pytest.mark.asyncio
async def test_get_owned_document(db_session: AsyncSession, owner: ActingUser, test_document):
    document = await get_owned_document(db_session, test_document.id, owner)

    assert document["id"] == test_document.id
    assert document["owner_id"] == owner.id


@pytest.mark.asyncio
async def test_get_owned_document_for_other_owner(db_session: AsyncSession, other_user: ActingUser, test_document):
    with pytest.raises(DocumentNotFoundError):
        await get_owned_document(db_session, test_document.id, other_user)


@pytest.mark.asyncio
async def test_get_or_404_combines_filters(db_session: AsyncSession, test_document, test_page, other_document):
    page = await get_or_404(page_crud, db_session, PageNotFoundError, id=test_page.id, document_id=test_document.id)
    assert page["id"] == test_page.id

    with pytest.raises(PageNotFoundError) as exc_info:
        await get_or_404(page_crud, db_session, PageNotFoundError, id=test_page.id, document_id=other_document.id)

    assert isinstance(exc_info.value, ResourceNotFoundError)
    assert str(exc_info.value) == "Page not found."
