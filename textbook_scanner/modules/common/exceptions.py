"""Domain exception classes for business logic errors."""


class DomainError(Exception):
    """Base class for all domain-specific errors.

    ``code`` is the classified error name returned to callers alongside the
    human-readable message.
    """

    code = "INTERNAL"
    default_message = "An unexpected error occurred."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class ValidationError(DomainError):
    """Raised when input data is malformed or missing required values."""

    code = "VALIDATION"
    default_message = "Invalid input."


class UnauthorizedError(DomainError):
    """Raised when no acting user could be resolved for the request."""

    code = "UNAUTHORIZED"
    default_message = "You must be signed in to perform this action."


class ResourceNotFoundError(DomainError):
    """Raised when a resource is absent or not owned by the acting user."""

    code = "NOT_FOUND"
    default_message = "Resource not found."


class DocumentNotFoundError(ResourceNotFoundError):
    default_message = "Document not found."


class PageNotFoundError(ResourceNotFoundError):
    default_message = "Page not found."


class HighlightNotFoundError(ResourceNotFoundError):
    default_message = "Highlight not found."
