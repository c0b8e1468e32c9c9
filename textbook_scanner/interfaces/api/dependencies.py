"""FastAPI dependencies for use in API endpoints."""

from typing import Annotated, Any, Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ...infrastructure.config.settings import get_settings
from ...infrastructure.database import async_session
from ...modules.common.auth import ActingUser, require_user
from ...modules.document.services import DocumentService
from ...modules.highlight.services import HighlightService
from ...modules.page.services import PageService
from ...modules.scan_job.services import ScanJobService

DbSession = Annotated[AsyncSession, Depends(async_session)]


def resolve_acting_user(request: Request) -> Optional[ActingUser]:
    """Read the user established by the upstream session layer.

    An auth middleware may put the user on ``request.state.user`` (an
    ``ActingUser`` or a mapping with at least ``id``). Otherwise the trusted
    header named by ``AUTH_USER_HEADER`` carries the user id.
    """
    state_user: Any = getattr(request.state, "user", None)
    if isinstance(state_user, ActingUser):
        return state_user
    if isinstance(state_user, dict) and state_user.get("id"):
        return ActingUser.model_validate(state_user)

    user_id = request.headers.get(get_settings().AUTH_USER_HEADER, "").strip()
    if user_id:
        return ActingUser(id=user_id)
    return None


def get_acting_user(request: Request) -> ActingUser:
    """Dependency resolving the acting user, failing with UNAUTHORIZED."""
    return require_user(resolve_acting_user(request))


CurrentUser = Annotated[ActingUser, Depends(get_acting_user)]


def get_document_service() -> DocumentService:
    """Dependency for providing a DocumentService instance."""
    return DocumentService()


def get_page_service() -> PageService:
    """Dependency for providing a PageService instance."""
    return PageService()


def get_highlight_service() -> HighlightService:
    """Dependency for providing a HighlightService instance."""
    return HighlightService()


def get_scan_job_service() -> ScanJobService:
    """Dependency for providing a ScanJobService instance."""
    return ScanJobService()
