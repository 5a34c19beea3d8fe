"""Centralized logging for the course library service.

Every module obtains its logger through ``get_logger`` so that the root
logger is configured once, from the application settings, before the first
record is emitted.

Usage:
    ```python
    from course_library.infrastructure.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Stored upload", extra={"catalog_path": "anglais-1/td/2024"})
    ```
"""

from .config import (
    configure_testing_logging,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
    setup_logging_configuration,
)
from .factory import configure_logging, get_logger

__all__ = [
    "get_logger",
    "configure_logging",
    "configure_testing_logging",
    "setup_logging_configuration",
    "generate_correlation_id",
    "get_correlation_id",
    "set_correlation_id",
    "reset_correlation_id",
]
