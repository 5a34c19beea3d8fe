"""Infrastructure module for the application."""

from .config.settings import get_settings

__all__ = [
    "get_settings",
]
