"""Logger factory with lazy, settings-driven configuration.

``get_logger`` is the single entry point modules use to obtain a logger. The
first call configures the root logger from application settings; subsequent
calls just return named loggers (optionally wrapped with fixed context).
"""

import logging
from threading import Lock
from typing import Any, MutableMapping, Optional, Tuple, Union

from ..config.settings import get_settings
from .config import get_configured_logger, setup_logging_configuration

_logging_configured = False
_configuration_lock = Lock()


class ContextLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that merges its fixed context with per-call ``extra``."""

    def process(self, msg: str, kwargs: MutableMapping[str, Any]) -> Tuple[str, MutableMapping[str, Any]]:
        extra = kwargs.get("extra", {})
        adapter_extra = self.extra if isinstance(self.extra, dict) else {}
        if isinstance(extra, dict):
            kwargs["extra"] = {**adapter_extra, **extra}
        else:
            kwargs["extra"] = dict(adapter_extra)
        return msg, kwargs


def get_logger(name: Optional[str] = None, **extra_context) -> Union[logging.Logger, logging.LoggerAdapter]:
    """Get a configured logger.

    Args:
        name: Logger name, typically ``__name__``. Defaults to the package logger.
        **extra_context: Fixed context added to every record from this logger.

    Returns:
        A logger, or a ``ContextLoggerAdapter`` when context was given.

    Example:
        ```python
        logger = get_logger(__name__)
        logger.info("Page saved", extra={"page_id": 12})

        job_logger = get_logger(__name__, component="scan_jobs")
        ```
    """
    _ensure_logging_configured()

    base_logger = get_configured_logger(name or "textbook_scanner")

    if extra_context:
        return ContextLoggerAdapter(base_logger, extra_context)
    return base_logger


def configure_logging() -> None:
    """Configure logging now instead of on the first ``get_logger`` call."""
    global _logging_configured

    with _configuration_lock:
        if _logging_configured:
            return

        setup_logging_configuration()
        _logging_configured = True

        settings = get_settings()
        logging.getLogger(__name__).info(
            f"Logging configured for {settings.ENVIRONMENT.value} environment",
            extra={
                "log_level": settings.LOG_LEVEL,
                "log_format": settings.LOG_FORMAT,
                "console_enabled": settings.LOG_CONSOLE_ENABLED,
                "file_enabled": settings.LOG_FILE_ENABLED,
            },
        )


def mark_logging_configured() -> None:
    """Stop ``get_logger`` from reconfiguring a root logger set up elsewhere (tests)."""
    global _logging_configured

    with _configuration_lock:
        _logging_configured = True


def _ensure_logging_configured() -> None:
    if not _logging_configured:
        configure_logging()
