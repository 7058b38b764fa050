"""
Reporter interface and the in-memory implementation.

A reporter receives three kinds of output from a review run:
informational messages, blocking failures, and long-form markdown.
Where they end up (a PR comment, a terminal, an HTTP response) is up
to the implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from pixelgate.core.constants import ReportKind
from pixelgate.core.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ReportEntry:
    """One piece of output emitted during a review."""

    kind: str                       # ReportKind value
    text: str

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "text": self.text}


class Reporter(ABC):
    """Base interface for review output sinks."""

    @abstractmethod
    async def message(self, text: str) -> None:
        """Emit an informational message."""
        ...

    @abstractmethod
    async def fail(self, text: str) -> None:
        """Emit a blocking failure."""
        ...

    @abstractmethod
    async def markdown(self, text: str) -> None:
        """Emit long-form explanatory text."""
        ...


@dataclass
class CollectingReporter(Reporter):
    """Keeps every entry in emission order; renders them as markdown."""

    entries: list[ReportEntry] = field(default_factory=list)

    async def message(self, text: str) -> None:
        self._add(ReportKind.MESSAGE, text)

    async def fail(self, text: str) -> None:
        self._add(ReportKind.FAIL, text)

    async def markdown(self, text: str) -> None:
        self._add(ReportKind.MARKDOWN, text)

    def _add(self, kind: ReportKind, text: str) -> None:
        self.entries.append(ReportEntry(kind=kind, text=text))
        logger.debug("Report entry added", kind=kind, text=text)

    def texts(self, kind: ReportKind) -> list[str]:
        return [e.text for e in self.entries if e.kind == kind]

    @property
    def failures(self) -> list[str]:
        return self.texts(ReportKind.FAIL)

    @property
    def messages(self) -> list[str]:
        return self.texts(ReportKind.MESSAGE)

    @property
    def markdowns(self) -> list[str]:
        return self.texts(ReportKind.MARKDOWN)

    def render(self) -> str:
        """Render the report the way it would appear in a PR comment."""
        sections = []
        if self.failures:
            sections.append("### Fails\n\n" + "\n".join(f"- :no_entry_sign: {t}" for t in self.failures))
        if self.messages:
            sections.append("### Messages\n\n" + "\n".join(f"- :book: {t}" for t in self.messages))
        sections.extend(self.markdowns)
        return "\n\n".join(sections)

    def to_list(self) -> list[dict[str, Any]]:
        return [e.to_dict() for e in self.entries]
