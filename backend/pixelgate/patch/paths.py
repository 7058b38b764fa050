"""
Record path parsing.

Diff paths are JSON pointers into the dataset document, e.g.
``/data/5`` (a whole record) or ``/data/5/color`` (one field of it).
"""

from __future__ import annotations

from dataclasses import dataclass

from pixelgate.core.constants import RECORD_PATH_PREFIX
from pixelgate.patch.errors import MalformedPathError


@dataclass(frozen=True)
class RecordPath:
    """A parsed diff path: which record, and which field inside it."""

    record_index: int
    field_path: tuple[str, ...] = ()

    @property
    def field_name(self) -> str | None:
        """Top-level record field targeted by the path, None for the whole record."""
        return self.field_path[0] if self.field_path else None

    @property
    def targets_whole_record(self) -> bool:
        return not self.field_path


def _unescape(segment: str) -> str:
    # RFC 6901: "~1" is "/", "~0" is "~"
    return segment.replace("~1", "/").replace("~0", "~")


def parse_record_path(path: object) -> RecordPath:
    """
    Parse a diff path into a RecordPath.

    Raises:
        MalformedPathError: the path is not a string of the form
            ``/data/<index>[/<field>...]`` with a purely numeric index.
    """
    if not isinstance(path, str):
        raise MalformedPathError(f"Diff path must be a string, got {type(path).__name__}", path=path)

    if not path.startswith(RECORD_PATH_PREFIX):
        raise MalformedPathError(f"Diff path '{path}' does not start with '{RECORD_PATH_PREFIX}'", path=path)

    segments = path[len(RECORD_PATH_PREFIX):].split("/")
    index_segment = segments[0]

    if not index_segment.isascii() or not index_segment.isdigit():
        raise MalformedPathError(f"Diff path '{path}' has no numeric record index", path=path)

    field_path = tuple(_unescape(s) for s in segments[1:])
    if any(s == "" for s in field_path):
        raise MalformedPathError(f"Diff path '{path}' has an empty field segment", path=path)

    return RecordPath(record_index=int(index_segment), field_path=field_path)


def get_index_from_path(path: object) -> int:
    """Return the record index a diff path points at."""
    return parse_record_path(path).record_index
