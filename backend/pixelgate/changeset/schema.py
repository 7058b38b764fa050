"""Change-set summary of a pull request."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ChangeSet(BaseModel):
    """Files touched by a pull request plus its total changed-line count."""

    model_config = ConfigDict(frozen=True)

    modified_files: list[str] = Field(default_factory=list)
    created_files: list[str] = Field(default_factory=list)
    deleted_files: list[str] = Field(default_factory=list)
    lines_of_code: int = Field(0, ge=0)

    @property
    def touched_files(self) -> list[str]:
        """Every touched file: modified, then created, then deleted."""
        return [*self.modified_files, *self.created_files, *self.deleted_files]
