"""Common constants used across the application."""

from typing import Dict, Type

from fastapi import status

from .exceptions import (
    DomainError,
    EmptyUploadError,
    FileTooLargeError,
    ResourceNotFoundError,
    StorageError,
    UnsupportedFormatError,
    ValidationError,
)

PDF_MEDIA_TYPE = "application/pdf"
PDF_SUFFIX = ".pdf"
UPLOAD_FIELD_NAME = "pdfs"

NOT_FOUND_MESSAGE = "404 Not Found"
INTERNAL_ERROR_MESSAGE = "Internal server error"

EXCEPTION_MAPPING: Dict[Type[DomainError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    UnsupportedFormatError: status.HTTP_400_BAD_REQUEST,
    FileTooLargeError: status.HTTP_400_BAD_REQUEST,
    EmptyUploadError: status.HTTP_400_BAD_REQUEST,
    ResourceNotFoundError: status.HTTP_404_NOT_FOUND,
    StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}
