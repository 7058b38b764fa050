"""
Pull-request sources — hand the review pipeline everything it reads:
who opened the pull request, which files it touches, and the
structured patch for a given file.

Computing the structured patch is the source's job; the review
pipeline never diffs JSON itself.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pixelgate.changeset.schema import ChangeSet
from pixelgate.pipeline.errors import CollaboratorError


class PullRequestSource(ABC):
    """Base interface for pull-request data providers."""

    @abstractmethod
    async def submitter(self) -> str:
        """Login of the pull request's author."""
        ...

    @abstractmethod
    async def change_set(self) -> ChangeSet:
        """Touched files and the total changed-line count."""
        ...

    @abstractmethod
    async def json_patch_for_file(self, path: str) -> dict[str, Any]:
        """Raw structured patch ``{before, after, diff}`` for one file."""
        ...


class PullRequestEvent(BaseModel):
    """
    A pull request captured as a single JSON document.

    Example::

        {
          "submitter": "alice",
          "change_set": {"modified_files": ["_data/pixels.json"], "lines_of_code": 6},
          "patches": {"_data/pixels.json": {"before": {...}, "after": {...}, "diff": [...]}}
        }
    """

    model_config = ConfigDict(frozen=True)

    submitter: str = Field(..., min_length=1)
    change_set: ChangeSet = Field(default_factory=ChangeSet)
    patches: dict[str, dict[str, Any]] = Field(default_factory=dict)


class EventPullRequestSource(PullRequestSource):
    """Serves a PullRequestEvent that is already in memory or on disk."""

    def __init__(self, event: PullRequestEvent) -> None:
        self.event = event

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> EventPullRequestSource:
        try:
            return cls(PullRequestEvent.model_validate(payload))
        except ValidationError as exc:
            raise CollaboratorError(
                f"Invalid pull request event: {exc.error_count()} error(s)",
                details={"errors": exc.errors(include_url=False)},
            ) from exc

    @classmethod
    def from_file(cls, path: str | Path) -> EventPullRequestSource:
        """Load an event document from a JSON file."""
        try:
            payload = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise CollaboratorError(f"Cannot read pull request event {path}: {exc}") from exc
        return cls.from_dict(payload)

    async def submitter(self) -> str:
        return self.event.submitter

    async def change_set(self) -> ChangeSet:
        return self.event.change_set

    async def json_patch_for_file(self, path: str) -> dict[str, Any]:
        if path not in self.event.patches:
            raise CollaboratorError(
                f"No structured patch available for '{path}'",
                details={"available": sorted(self.event.patches)},
            )
        return self.event.patches[path]
