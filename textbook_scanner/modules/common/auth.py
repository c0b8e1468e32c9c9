"""Acting-user context passed explicitly into every service call.

Authentication itself lives upstream (session middleware or gateway); this
module only models the resolved identity and the "must be signed in" guard.
"""

from typing import Annotated, Optional

from pydantic import BaseModel, Field, StringConstraints

from .exceptions import UnauthorizedError


class ActingUser(BaseModel):
    """The user on whose behalf an operation runs."""

    id: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    email: Optional[str] = None
    name: Optional[str] = Field(default=None, description="Display name, informational only")


def require_user(user: Optional[ActingUser]) -> ActingUser:
    """Return ``user`` or raise UNAUTHORIZED when no session user was resolved."""
    if user is None:
        raise UnauthorizedError()
    return user
