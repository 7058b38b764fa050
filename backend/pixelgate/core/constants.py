"""Shared constants and enums used across the application."""

from enum import StrEnum

# Top-level key of the dataset document; every record path starts with it.
DATASET_KEY = "data"
RECORD_PATH_PREFIX = f"/{DATASET_KEY}/"


class OperationKind(StrEnum):
    """Kinds of diff operations accepted in a structured patch."""

    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    TEST = "test"


class RejectionCategory(StrEnum):
    """Why a contribution was turned down."""

    STRUCTURAL = "STRUCTURAL"
    OWNERSHIP = "OWNERSHIP"
    IDENTITY = "IDENTITY"
    FIELD = "FIELD"


class ReportKind(StrEnum):
    """Entry kinds a reporter can emit."""

    MESSAGE = "MESSAGE"
    FAIL = "FAIL"
    MARKDOWN = "MARKDOWN"


class ReviewStatus(StrEnum):
    """Overall status of a review run."""

    PENDING = "PENDING"
    RUNNING = "RUNNING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


class StepStatus(StrEnum):
    """Status of an individual review step."""

    PENDING = "PENDING"
    RUNNING = "RUNNING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    SKIPPED = "SKIPPED"


class ChangeSetKind(StrEnum):
    """How the change-set gate sees a pull request."""

    EMPTY = "EMPTY"
    FOREIGN_FILES = "FOREIGN_FILES"
    DATASET_ONLY = "DATASET_ONLY"
