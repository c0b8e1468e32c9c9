from datetime import UTC, datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import Mapped, MappedAsDataclass, mapped_column


def utc_now() -> datetime:
    return datetime.now(UTC)


class CreatedAtMixin(MappedAsDataclass):
    """Mixin for tables that only record when a row was created.

    Used by append-style records (highlights, scan jobs) that have no
    ``updated_at`` column. The timestamp is UTC and excluded from the
    dataclass ``__init__``.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default_factory=utc_now,
        nullable=False,
        init=False,
    )


class TimestampMixin(MappedAsDataclass):
    """Mixin for adding created_at and updated_at timestamp columns.

    Both timestamps are timezone-aware UTC values and excluded from dataclass
    initialization. ``updated_at`` is not refreshed by the database; services
    set it explicitly on every write (FastCRUD also stamps it on ``update``).

    Example:
        ```python
        class Page(Base, TimestampMixin):
            __tablename__ = "textbook_pages"
            ...

        page = Page(document_id=1)
        # page.created_at and page.updated_at are set on construction
        ```
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default_factory=utc_now,
        nullable=False,
        init=False,
    )

    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        default_factory=utc_now,
        nullable=True,
        init=False,
    )
