"""Test configuration and fixtures for the textbook scanner backend."""

import os

# Settings are read once at import time, so the environment must be in place first.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["ENVIRONMENT"] = "development"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"
os.environ["LOG_SQL_QUERIES"] = "false"

from typing import Callable, Dict  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402

from textbook_scanner.infrastructure.config.settings import get_settings  # noqa: E402
from textbook_scanner.infrastructure.database.session import Base, async_session  # noqa: E402
from textbook_scanner.infrastructure.logging import configure_testing_logging, mark_logging_configured  # noqa: E402
from textbook_scanner.interfaces.main import app  # noqa: E402
from textbook_scanner.modules.common.auth import ActingUser  # noqa: E402
from textbook_scanner.modules.document.schemas import DocumentCreate  # noqa: E402
from textbook_scanner.modules.document.services import DocumentService  # noqa: E402
from textbook_scanner.modules.page.schemas import PageSave  # noqa: E402
from textbook_scanner.modules.page.services import PageService  # noqa: E402

configure_testing_logging()
mark_logging_configured()


@pytest_asyncio.fixture(scope="function")
async def test_db_engine(tmp_path):
    """Create a SQLAlchemy engine on a throwaway SQLite file."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_db_engine):
    """Create a test database session."""
    session_factory = async_sessionmaker(test_db_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(test_db_engine):
    """Create a test client where every request gets its own session on the test database."""
    app.dependency_overrides = {}

    test_session_factory = async_sessionmaker(test_db_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[async_session] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides = {}


@pytest.fixture
def owner() -> ActingUser:
    return ActingUser(id="user-1", email="asha@example.com", name="Asha")


@pytest.fixture
def other_user() -> ActingUser:
    return ActingUser(id="user-2", email="ravi@example.com", name="Ravi")


@pytest.fixture
def auth_headers() -> Callable[[ActingUser], Dict[str, str]]:
    """Build the trusted-header credentials the API expects for a user."""

    def _headers(user: ActingUser) -> Dict[str, str]:
        return {get_settings().AUTH_USER_HEADER: user.id}

    return _headers


@pytest_asyncio.fixture
async def test_document(db_session: AsyncSession, owner: ActingUser):
    """Create a document owned by ``owner``."""
    response = await DocumentService().create_document(
        DocumentCreate(
            title="Class 11 Physics - Chapter 2",
            subject="Physics",
            grade_level="11",
            board="CBSE",
            source_meta={"fileName": "chapter2.pdf", "pageCount": 24},
        ),
        owner,
        db_session,
    )
    return response.document


@pytest_asyncio.fixture
async def other_document(db_session: AsyncSession, other_user: ActingUser):
    """Create a document owned by ``other_user``."""
    response = await DocumentService().create_document(
        DocumentCreate(title="Class 9 Chemistry - Chapter 1"), other_user, db_session
    )
    return response.document


@pytest_asyncio.fixture
async def test_page(db_session: AsyncSession, owner: ActingUser, test_document):
    """Create the first page of ``test_document``."""
    response = await PageService().save_page(
        PageSave(document_id=test_document.id, ocr_text="Newton's laws of motion", ocr_blocks=[{"line": 1}]),
        owner,
        db_session,
    )
    return response.page


@pytest_asyncio.fixture
async def other_page(db_session: AsyncSession, other_user: ActingUser, other_document):
    """Create a page of ``other_document``."""
    response = await PageService().save_page(
        PageSave(document_id=other_document.id, ocr_text="Atoms and molecules"), other_user, db_session
    )
    return response.page
