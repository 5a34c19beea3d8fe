"""Domain exception classes for business logic errors."""


class DomainError(Exception):
    """Base class for all domain-specific errors."""

    pass


class ValidationError(DomainError):
    """Raised when a required catalog field is missing or malformed."""

    pass


class UnsupportedFormatError(DomainError):
    """Raised when an uploaded part is not a PDF."""

    pass


class FileTooLargeError(DomainError):
    """Raised when an uploaded part exceeds the configured size limit."""

    def __init__(self, filename: str, limit: int):
        self.filename = filename
        self.limit = limit
        super().__init__(f"File '{filename}' exceeds the maximum upload size of {limit // (1024 * 1024)} MB")


class EmptyUploadError(DomainError):
    """Raised when an upload request carries no file."""

    pass


class ResourceNotFoundError(DomainError):
    """Raised when a requested resource cannot be found."""

    pass


class StorageError(DomainError):
    """Raised when the storage directory cannot be read or written."""

    pass
