from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, MappedAsDataclass

from ..config.settings import settings

engine_options: Dict[str, Any] = {"echo": settings.LOG_SQL_QUERIES, "future": True}
if not settings.DATABASE_IS_SQLITE:
    engine_options["pool_size"] = settings.DATABASE_POOL_SIZE
    engine_options["max_overflow"] = settings.DATABASE_MAX_OVERFLOW

engine = create_async_engine(settings.DATABASE_URL, **engine_options)

local_session = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


class Base(DeclarativeBase, MappedAsDataclass):
    """Base class for all database models.

    Combines SQLAlchemy's DeclarativeBase with MappedAsDataclass, so every
    model gets a dataclass ``__init__`` built from its mapped columns. Columns
    declared with ``init=False`` (primary keys, timestamps) are filled by the
    database or by their default factories.
    """

    pass


async def async_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency for database session management.

    Yields one session per request and closes it when the request ends.
    Used as ``Depends(async_session)`` and overridden in tests.
    """
    async_get_db = local_session
    async with async_get_db() as db:
        yield db


async def create_tables() -> None:
    """Create all tables in the database if they don't exist.

    Idempotent: existing tables are left unchanged. This is the only schema
    management the project ships; there is no migrations engine.
    """
    # Model modules register their tables on Base.metadata when imported.
    from ...modules import TABLES  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
