"""
models/errors.py
----------------
Error codes and exception types raised by the model and repository layers.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Model error codes."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    DUPLICATE_SLUG = "DUPLICATE_SLUG"
    DOCUMENT_NOT_FOUND = "DOCUMENT_NOT_FOUND"


@dataclass(eq=False)
class ModelError(Exception):
    """Base model error with code and human-readable message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(ModelError):
    """Raised when a field fails pre-save validation."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(code=ErrorCode.VALIDATION_FAILED, message=message)
        self.field = field


class EventNotFoundError(ModelError):
    """Raised when a booking references an event that does not exist."""

    def __init__(self, event_id: object) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Referenced event does not exist",
        )
        self.event_id = event_id


class DuplicateSlugError(ModelError):
    """Raised when the unique slug index rejects a write."""

    def __init__(self, slug: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_SLUG,
            message=f'An event with slug "{slug}" already exists',
        )
        self.slug = slug


class DocumentNotFoundError(ModelError):
    """Raised when updating a document that is no longer stored."""

    def __init__(self, collection: str, document_id: object) -> None:
        super().__init__(
            code=ErrorCode.DOCUMENT_NOT_FOUND,
            message=f"No document {document_id} in {collection}",
        )
        self.collection = collection
        self.document_id = document_id
