"""
Structured patch schema.

A structured patch is what the pull-request source hands over for the
dataset file: the document before and after the change plus the list of
path-based diff operations between them.  Operations form a closed union
discriminated on ``op``; anything else is rejected while parsing.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pixelgate.core.constants import OperationKind
from pixelgate.patch.errors import PatchFormatError, RecordLookupError, UnsupportedOperationError
from pixelgate.patch.paths import RecordPath, parse_record_path


class PixelRecord(BaseModel):
    """
    One entry of the dataset.

    Fields are deliberately untyped: a submission is allowed to carry a
    bad ``x`` or an empty ``color`` and the validator has to say so,
    rather than the parser refusing the whole patch.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    x: Any = None
    y: Any = None
    color: Any = None
    username: Any = None

    @classmethod
    def from_value(cls, value: Any) -> PixelRecord:
        """Build a record from a diff value or snapshot entry of any shape."""
        if isinstance(value, PixelRecord):
            return value
        if isinstance(value, dict):
            return cls.model_validate(value)
        return cls()


class DatasetSnapshot(BaseModel):
    """The dataset document (``{"data": [...]}``) at one point in time."""

    model_config = ConfigDict(extra="allow", frozen=True)

    data: list[Any] = Field(default_factory=list)

    def has_record(self, index: int) -> bool:
        return 0 <= index < len(self.data)

    def record_at(self, index: int) -> PixelRecord:
        """Return the record at `index`.  Raises RecordLookupError if absent."""
        if not self.has_record(index):
            raise RecordLookupError(
                f"No record at index {index} (snapshot has {len(self.data)})",
                record_index=index,
            )
        return PixelRecord.from_value(self.data[index])


# ─── Diff operations ──────────────────────────────────


class _DiffOperationBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str

    @property
    def record_path(self) -> RecordPath:
        """Parsed path.  Raises MalformedPathError on a bad path."""
        return parse_record_path(self.path)


class AddOperation(_DiffOperationBase):
    op: Literal["add"] = "add"
    value: Any = None


class RemoveOperation(_DiffOperationBase):
    op: Literal["remove"] = "remove"


class ReplaceOperation(_DiffOperationBase):
    op: Literal["replace"] = "replace"
    value: Any = None


class TestOperation(_DiffOperationBase):
    __test__ = False  # keep pytest from collecting this class

    op: Literal["test"] = "test"
    value: Any = None


DiffOperation = Annotated[
    Union[AddOperation, RemoveOperation, ReplaceOperation, TestOperation],
    Field(discriminator="op"),
]


class StructuredPatch(BaseModel):
    """Before/after snapshots plus the ordered diff between them."""

    model_config = ConfigDict(frozen=True)

    before: DatasetSnapshot = Field(default_factory=DatasetSnapshot)
    after: DatasetSnapshot = Field(default_factory=DatasetSnapshot)
    diff: list[DiffOperation] = Field(default_factory=list)

    @classmethod
    def parse(cls, raw: Any) -> StructuredPatch:
        """
        Parse a raw patch document.

        Raises:
            UnsupportedOperationError: a diff entry has an unknown ``op``.
            PatchFormatError: anything else about the document is off.
        """
        if isinstance(raw, StructuredPatch):
            return raw
        if not isinstance(raw, dict):
            raise PatchFormatError(f"Patch must be an object, got {type(raw).__name__}")

        diff = raw.get("diff")
        if isinstance(diff, list):
            known = {kind.value for kind in OperationKind}
            for entry in diff:
                op = entry.get("op") if isinstance(entry, dict) else None
                if op not in known:
                    raise UnsupportedOperationError(f"Unsupported diff operation: {op!r}", op=op)

        try:
            return cls.model_validate(raw)
        except ValidationError as exc:
            raise PatchFormatError(
                f"Invalid patch document: {exc.error_count()} error(s)",
                details={"errors": exc.errors(include_url=False)},
            ) from exc
