"""Domain errors for ShareBox.

Every error carries the HTTP status it maps to; the API layer turns them
into ``{"detail": message}`` responses via a single exception handler.
"""

from __future__ import annotations


class ShareBoxError(Exception):
    """Base class for all per-request ShareBox failures."""

    status_code: int = 400
    default_message: str = "Request failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class DuplicateEmail(ShareBoxError):
    """Raised on signup when the email is already registered."""

    status_code = 400
    default_message = "Email is already taken"

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__()


class InvalidCredentials(ShareBoxError):
    status_code = 401
    default_message = "Invalid credentials"


class UnknownOwner(ShareBoxError):
    """Raised when an upload names an owner that never signed up."""

    status_code = 404
    default_message = "User not found"

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__()


class NotFound(ShareBoxError):
    """Raised when no file record matches a storage key."""

    status_code = 404
    default_message = "File not found"

    def __init__(self, storage_key: str) -> None:
        self.storage_key = storage_key
        super().__init__()


class Forbidden(ShareBoxError):
    """Raised when the requester fails an ownership or admin check."""

    status_code = 403
    default_message = "Forbidden"


class StorageWriteError(ShareBoxError):
    status_code = 500
    default_message = "Failed to store uploaded file"


class StorageMissing(ShareBoxError):
    """Raised when a blob is not present in the upload directory."""

    status_code = 404
    default_message = "File not found"

    def __init__(self, storage_key: str) -> None:
        self.storage_key = storage_key
        super().__init__()
