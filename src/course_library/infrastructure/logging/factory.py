"""Logger factory with lazy, one-time configuration."""

import logging
from threading import Lock
from typing import Optional, Union

from ..config.settings import Settings, get_settings
from .config import setup_logging_configuration

_logging_configured = False
_configuration_lock = Lock()


def get_logger(name: Optional[str] = None, **extra_context) -> Union[logging.Logger, logging.LoggerAdapter]:
    """Get a logger, configuring the logging system on first use.

    Args:
        name: Logger name, typically ``__name__``. Defaults to the package logger.
        **extra_context: Context added to every record emitted through the logger.

    Returns:
        Configured logger, wrapped in an adapter when extra context is given.

    Example:
        ```python
        logger = get_logger(__name__, component="catalog")
        logger.info("Listing requested", extra={"subject": "anglais-1"})
        ```
    """
    _ensure_logging_configured()

    base_logger = logging.getLogger(name or "course_library")

    if extra_context:
        return ContextLoggerAdapter(base_logger, extra_context)
    return base_logger


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure logging now instead of on the first ``get_logger`` call.

    Args:
        settings: Settings the application was built with. When given, logging
            is reconfigured from them even if it was already set up from the
            global settings.
    """
    global _logging_configured

    with _configuration_lock:
        if settings is not None or not _logging_configured:
            settings = settings or get_settings()
            setup_logging_configuration(settings)
            _logging_configured = True

            logging.getLogger(__name__).info(
                f"Logging configured for {settings.ENVIRONMENT.value} environment",
                extra={
                    "log_level": settings.LOG_LEVEL,
                    "log_format": settings.LOG_FORMAT,
                    "console_enabled": settings.LOG_CONSOLE_ENABLED,
                    "file_enabled": settings.LOG_FILE_ENABLED,
                },
            )


def _ensure_logging_configured() -> None:
    if not _logging_configured:
        configure_logging()


class ContextLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that merges its bound context with per-call ``extra``."""

    def process(self, msg, kwargs):
        extra = kwargs.get("extra") or {}
        bound = self.extra if isinstance(self.extra, dict) else {}
        kwargs["extra"] = {**bound, **extra}
        return msg, kwargs
