"""Filesystem storage root for the document tree.

Layout: ``<root>/<subject>/<type>/<year>/<stored-name>.pdf``. The directory
tree is the only state the service keeps; nothing is cached in memory.
"""

import os
from pathlib import Path

from ...modules.common.exceptions import StorageError, ValidationError
from ..logging import get_logger

logger = get_logger(__name__)


class StorageRoot:
    """Root directory of the document tree.

    Resolved once when the application is built and handed explicitly to the
    services that read or write documents.
    """

    def __init__(self, path: str | os.PathLike[str]):
        self.path = Path(path).expanduser().resolve()

    def __repr__(self) -> str:
        return f"StorageRoot({str(self.path)!r})"

    def ensure(self) -> Path:
        """Create the root directory if it does not exist yet."""
        try:
            self.path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot create storage root {self.path}: {e.strerror or e}") from e
        logger.debug(f"Storage root ready at {self.path}")
        return self.path

    def resolve(self, *segments: str) -> Path:
        """Join ``segments`` under the root, refusing anything that escapes it.

        Raises:
            ValidationError: If the joined path is not inside the root
        """
        target = self.path.joinpath(*segments).resolve()
        if target != self.path and self.path not in target.parents:
            raise ValidationError(f"Path '{'/'.join(segments)}' is outside the storage root")
        return target

    def relative(self, path: Path) -> str:
        """Path of ``path`` relative to the root, with ``/`` separators."""
        return path.relative_to(self.path).as_posix()
