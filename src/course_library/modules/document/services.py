"""Upload and catalog services over the filesystem document tree."""

import os
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, List, Optional, Sequence, Tuple

import anyio
from pydantic import ValidationError as PydanticValidationError

from ...infrastructure.logging import get_logger
from ...infrastructure.storage import StorageRoot
from ..common.exceptions import (
    EmptyUploadError,
    FileTooLargeError,
    StorageError,
    UnsupportedFormatError,
    ValidationError,
)
from ..common.utils.collation import collate
from .filenames import build_file_url, is_pdf_name, is_pdf_upload, sanitize_filename
from .schemas import CatalogPath, StoredFile, UploadedFile

logger = get_logger(__name__)

DEFAULT_MAX_UPLOAD_SIZE = 50 * 1024 * 1024
COPY_CHUNK_SIZE = 1024 * 1024


@dataclass
class IncomingFile:
    """One file part of an upload request."""

    filename: str
    content_type: Optional[str]
    stream: BinaryIO


def parse_catalog_path(subject: Optional[str], document_type: Optional[str], year: Optional[str]) -> CatalogPath:
    """Validate the catalog fields of a request.

    Raises:
        ValidationError: If any of subject, type or year is missing, empty or
            not a single directory name
    """
    try:
        return CatalogPath(subject=subject or "", type=document_type or "", year=year or "")
    except PydanticValidationError as e:
        fields = sorted({str(error["loc"][0]) for error in e.errors() if error.get("loc")})
        raise ValidationError(f"subject, type and year are required; invalid or missing: {', '.join(fields)}") from e


class UploadService:
    """Stores uploaded PDFs under ``<root>/<subject>/<type>/<year>``.

    A request is all-or-nothing: every part is first streamed to a hidden
    staging file next to its destination, and the staging files are only
    renamed onto their stored names once every part has been accepted. Any
    failure discards all staging files of the request. Stored names already
    on disk are overwritten when the batch commits.
    """

    def __init__(self, storage: StorageRoot, max_upload_size: int = DEFAULT_MAX_UPLOAD_SIZE):
        self.storage = storage
        self.max_upload_size = max_upload_size

    async def upload_documents(
        self,
        subject: Optional[str],
        document_type: Optional[str],
        year: Optional[str],
        files: Sequence[IncomingFile],
    ) -> List[UploadedFile]:
        """Validate and store the PDFs of one upload request.

        Args:
            subject: Catalog subject
            document_type: Catalog document type
            year: Catalog year
            files: File parts of the request; parts without a filename are ignored

        Returns:
            One entry per stored file, in request order

        Raises:
            ValidationError: Missing or malformed catalog field
            UnsupportedFormatError: A part is neither declared nor named as PDF
            EmptyUploadError: No file part in the request
            FileTooLargeError: A part exceeds ``max_upload_size``
            StorageError: The destination could not be written
        """
        catalog_path = parse_catalog_path(subject, document_type, year)

        parts = [part for part in files if part.filename]
        for part in parts:
            if not is_pdf_upload(part.content_type, part.filename):
                raise UnsupportedFormatError(f"Only PDF files are accepted: '{part.filename}' is not a PDF")

        if not parts:
            raise EmptyUploadError("No file was uploaded")

        target_dir = self.storage.resolve(*catalog_path.parts)
        await anyio.to_thread.run_sync(self._ensure_directory, target_dir)

        staged: List[Tuple[Path, int]] = []
        try:
            for part in parts:
                staged.append(await anyio.to_thread.run_sync(self._stage, part, target_dir))

            results = []
            for part, (staging_path, size) in zip(parts, staged):
                stored_name = sanitize_filename(part.filename)
                await anyio.to_thread.run_sync(self._commit, staging_path, target_dir / stored_name)
                results.append(
                    UploadedFile(
                        name=stored_name,
                        original_name=part.filename,
                        size=size,
                        url=build_file_url(*catalog_path.parts, stored_name),
                    )
                )
        finally:
            await anyio.to_thread.run_sync(self._discard, [staging_path for staging_path, _ in staged])

        logger.info(
            f"Stored {len(results)} file(s) in {catalog_path}",
            extra={"catalog_path": str(catalog_path), "files": [result.name for result in results]},
        )
        return results

    def _ensure_directory(self, directory: Path) -> None:
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot create directory for upload: {e.strerror or e}") from e

    def _stage(self, part: IncomingFile, directory: Path) -> Tuple[Path, int]:
        """Copy one part into a staging file, enforcing the size limit."""
        staging_path = directory / f".upload-{uuid.uuid4().hex}.part"
        size = 0
        try:
            with open(staging_path, "wb") as out:
                while chunk := part.stream.read(COPY_CHUNK_SIZE):
                    size += len(chunk)
                    if size > self.max_upload_size:
                        raise FileTooLargeError(part.filename, self.max_upload_size)
                    out.write(chunk)
        except FileTooLargeError:
            staging_path.unlink(missing_ok=True)
            raise
        except OSError as e:
            staging_path.unlink(missing_ok=True)
            raise StorageError(f"Failed to store '{part.filename}': {e.strerror or e}") from e
        return staging_path, size

    def _commit(self, staging_path: Path, destination: Path) -> None:
        try:
            os.replace(staging_path, destination)
        except OSError as e:
            raise StorageError(f"Failed to store '{destination.name}': {e.strerror or e}") from e

    def _discard(self, staging_paths: List[Path]) -> None:
        for staging_path in staging_paths:
            try:
                staging_path.unlink(missing_ok=True)
            except OSError as e:
                logger.warning(f"Could not remove staging file {staging_path}: {e}")


class CatalogService:
    """Lists the PDFs stored for one catalog path.

    Every call re-reads the directory; there is no index.
    """

    def __init__(self, storage: StorageRoot):
        self.storage = storage

    async def list_documents(
        self,
        subject: Optional[str],
        document_type: Optional[str],
        year: Optional[str],
    ) -> List[StoredFile]:
        """List stored PDFs for (subject, type, year), in collation order.

        A catalog path with no directory yet is an empty listing.

        Raises:
            ValidationError: Missing or malformed catalog field
            StorageError: The directory exists but cannot be read
        """
        catalog_path = parse_catalog_path(subject, document_type, year)
        directory = self.storage.resolve(*catalog_path.parts)

        entries = await anyio.to_thread.run_sync(self._scan, directory, catalog_path)
        files = [
            StoredFile(name=name, size=size, url=build_file_url(*catalog_path.parts, name)) for name, size in entries
        ]
        logger.debug(f"Listed {len(files)} file(s) in {catalog_path}")
        return collate(files, key=lambda stored: stored.name)

    def _scan(self, directory: Path, catalog_path: CatalogPath) -> List[Tuple[str, int]]:
        try:
            with os.scandir(directory) as it:
                return [(entry.name, entry.stat().st_size) for entry in it if is_pdf_name(entry.name) and entry.is_file()]
        except FileNotFoundError:
            if directory.exists():
                raise StorageError(f"Failed to read files for {catalog_path}: a file vanished while listing")
            return []
        except OSError as e:
            raise StorageError(f"Failed to read files for {catalog_path}: {e.strerror or e}") from e
