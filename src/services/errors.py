"""Errors raised by the tag catalog service and its storage layer."""
from enum import Enum


NO_ELEMENT_FOUND = "No Element Found"


class TagErrorKind(Enum):
    """Failure kinds for a single-tag lookup."""

    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    LOOKUP_ERROR = "lookup_error"


class TagError(Exception):
    """
    Raised when a single-tag lookup does not produce a tag.

    Callers branch on `kind`; `message` is diagnostic only.
    """

    def __init__(self, kind: TagErrorKind, message: str) -> None:
        self.kind = kind
        self.message = message
        super().__init__(message)


class StorageError(Exception):
    """Raised when the underlying data store fails or times out."""


class AggregationError(Exception):
    """Raised when the tag count map cannot be computed or is malformed."""
