"""Introspection of the whole storage tree."""

import os
from pathlib import Path
from typing import List, Tuple

import anyio

from ...infrastructure.logging import get_logger
from ...infrastructure.storage import StorageRoot
from ..common.exceptions import StorageError
from ..common.utils.collation import collate
from ..document.filenames import is_pdf_name
from .schemas import StructureNode

logger = get_logger(__name__)


class StructureService:
    """Builds a tree of every directory and PDF under the storage root.

    Used for debugging; the student and admin flows never depend on it.
    """

    def __init__(self, storage: StorageRoot):
        self.storage = storage

    async def get_structure(self) -> List[StructureNode]:
        """Return the top-level nodes of the storage tree.

        Raises:
            StorageError: If a directory in the tree cannot be read
        """
        return await anyio.to_thread.run_sync(self._walk)

    def _walk(self) -> List[StructureNode]:
        top_level: List[StructureNode] = []
        if not self.storage.path.is_dir():
            return top_level

        # Depth-first over an explicit stack of (directory, list receiving its entries).
        stack: List[Tuple[Path, List[StructureNode]]] = [(self.storage.path, top_level)]
        while stack:
            directory, siblings = stack.pop()
            for entry in self._read_directory(directory):
                entry_path = Path(entry.path)
                relative = self.storage.relative(entry_path)
                try:
                    if entry.is_dir(follow_symlinks=False):
                        node = StructureNode(name=entry.name, type="directory", path=relative, children=[])
                        siblings.append(node)
                        stack.append((entry_path, node.children))
                    elif is_pdf_name(entry.name) and entry.is_file():
                        size = entry.stat().st_size
                        siblings.append(StructureNode(name=entry.name, type="file", path=relative, size=size))
                except OSError as e:
                    raise StorageError(f"Failed to read storage structure at '{relative}': {e.strerror or e}") from e

        logger.debug(f"Enumerated storage structure under {self.storage.path}")
        return top_level

    def _read_directory(self, directory: Path) -> List[os.DirEntry]:
        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            raise StorageError(f"Failed to read storage structure: {e.strerror or e}") from e
        return collate(entries, key=lambda entry: entry.name)
