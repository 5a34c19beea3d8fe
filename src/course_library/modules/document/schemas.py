"""Pydantic schemas for stored documents."""

from enum import Enum
from typing import Annotated, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DocumentType(str, Enum):
    """Document types offered by the admin upload form."""

    COURS = "cours"
    TD = "td"
    TP = "tp"
    EXAM = "exam"


CatalogSegment = Annotated[str, Field(min_length=1, max_length=255)]


class CatalogPath(BaseModel):
    """The (subject, type, year) triple that both stores and finds documents.

    Each value becomes one directory level under the storage root, so it must
    be a single non-empty path segment.
    """

    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    subject: CatalogSegment
    type: CatalogSegment
    year: CatalogSegment

    @field_validator("subject", "type", "year")
    @classmethod
    def check_single_segment(cls, value: str) -> str:
        if value in (".", "..") or any(char in value for char in ("/", "\\", "\x00")):
            raise ValueError("must be a single directory name")
        return value

    @property
    def parts(self) -> tuple[str, str, str]:
        return (self.subject, self.type, self.year)

    def __str__(self) -> str:
        return "/".join(self.parts)


class StoredFile(BaseModel):
    """A PDF as listed by the catalog."""

    name: str = Field(description="Stored filename")
    size: int = Field(ge=0, description="Size in bytes")
    url: str = Field(description="Retrieval URL under /files")


class UploadedFile(StoredFile):
    """A PDF accepted by an upload request."""

    model_config = ConfigDict(populate_by_name=True)

    original_name: str = Field(alias="originalName", description="Filename as sent by the uploader")


class UploadResponse(BaseModel):
    """Successful upload result."""

    success: bool = True
    files: List[UploadedFile]


class FileListResponse(BaseModel):
    """Catalog listing for one (subject, type, year)."""

    success: bool = True
    files: List[StoredFile]
