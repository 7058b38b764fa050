"""
Verdict — the structured outcome of validating a patch.

Checks append rejections to a ReasonCollector in the order they are
detected; the collector is frozen into a Verdict at the end.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pixelgate.core.constants import RejectionCategory


@dataclass(frozen=True)
class Rejection:
    """A single reason a contribution was turned down."""

    category: str                   # RejectionCategory value
    text: str

    def to_dict(self) -> dict[str, Any]:
        return {"category": self.category, "text": self.text}


@dataclass(frozen=True)
class Verdict:
    """Pass/fail plus every rejection reason, in detection order."""

    ok: bool
    reasons: tuple[Rejection, ...] = ()

    @property
    def messages(self) -> list[str]:
        return [r.text for r in self.reasons]

    def has_category(self, category: RejectionCategory) -> bool:
        return any(r.category == category for r in self.reasons)

    def to_dict(self) -> dict[str, Any]:
        return {"ok": self.ok, "reasons": [r.to_dict() for r in self.reasons]}


@dataclass
class ReasonCollector:
    """Accumulates rejections while a patch is being checked."""

    reasons: list[Rejection] = field(default_factory=list)

    def reject(self, category: RejectionCategory, text: str) -> None:
        self.reasons.append(Rejection(category=category, text=text))

    def verdict(self, ok: bool) -> Verdict:
        return Verdict(ok=ok, reasons=tuple(self.reasons))
