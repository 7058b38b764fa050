"""
Exceptions raised while reading a structured patch.

All of them inherit from PatchFormatError so callers can catch broadly
when they only care that the patch could not be understood.
"""

from __future__ import annotations


class PatchFormatError(Exception):
    """Base exception for patches that do not have the expected shape."""

    def __init__(self, message: str, *, details: dict | None = None) -> None:
        self.details = details or {}
        super().__init__(message)


class MalformedPathError(PatchFormatError):
    """A diff path does not point at a record of the dataset."""

    def __init__(self, message: str, *, path: object = None, **kwargs) -> None:
        self.path = path
        super().__init__(message, **kwargs)


class UnsupportedOperationError(PatchFormatError):
    """A diff entry uses an operation kind outside add/remove/replace/test."""

    def __init__(self, message: str, *, op: object = None, **kwargs) -> None:
        self.op = op
        super().__init__(message, **kwargs)


class RecordLookupError(PatchFormatError):
    """A record index has no entry in the before/after snapshot."""

    def __init__(self, message: str, *, record_index: int | None = None, **kwargs) -> None:
        self.record_index = record_index
        super().__init__(message, **kwargs)
