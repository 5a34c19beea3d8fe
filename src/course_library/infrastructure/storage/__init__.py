"""Filesystem storage for uploaded documents."""

from .filesystem import StorageRoot

__all__ = ["StorageRoot"]
