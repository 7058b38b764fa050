"""
ReviewContext — mutable state object carried through every step.

This is the single source of truth for a review run.  Each step
reads from and writes to the context.  The engine serialises a
summary of the final context into the ReviewResult.

A step that rejects the pull request calls ``ctx.halt()``; the
remaining steps see the flag and skip themselves.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any

from pixelgate.changeset.schema import ChangeSet
from pixelgate.core.config import settings
from pixelgate.patch.schema import StructuredPatch
from pixelgate.reporting.reporter import Reporter
from pixelgate.validation.verdict import Verdict

if TYPE_CHECKING:
    from pixelgate.ingestion.pull_request_source import PullRequestSource


# ═══════════════════════════════════════════════════════════
#  StepResult
# ═══════════════════════════════════════════════════════════

@dataclass
class StepResult:
    """Outcome of a single review step execution."""

    step_name: str
    status: str                     # StepStatus value
    started_at: datetime | None = None
    completed_at: datetime | None = None
    duration_ms: int = 0
    error: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Serialise for API responses and logs."""
        return {
            "step_name": self.step_name,
            "status": self.status,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "duration_ms": self.duration_ms,
            "error": self.error,
            "metadata": self.metadata,
        }


# ═══════════════════════════════════════════════════════════
#  ReviewContext
# ═══════════════════════════════════════════════════════════

@dataclass
class ReviewContext:
    """
    Carries all state between review steps.

    Populated progressively — the gate steps fill in the submitter and
    change set, later steps the parsed patch and the verdict.
    """

    # ─── Collaborators (set at init) ───────────────────
    source: PullRequestSource
    reporter: Reporter
    run_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    dataset_file: str = field(default_factory=lambda: settings.DATASET_FILE)

    # ─── Pull request (populated by load_change_set) ──
    submitter: str | None = None
    change_set: ChangeSet | None = None
    change_set_kind: str | None = None      # ChangeSetKind value

    # ─── Patch + verdict ──────────────────────────────
    patch: StructuredPatch | None = None
    verdict: Verdict | None = None

    # ─── Execution tracking ────────────────────────────
    halted: bool = False
    halt_reason: str | None = None
    current_step_index: int = 0
    total_steps: int = 0
    step_results: list[StepResult] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        """True once a verdict exists and it accepts the contribution."""
        return not self.halted and self.verdict is not None and self.verdict.ok

    def halt(self, reason: str) -> None:
        """Stop the review; remaining steps are skipped."""
        self.halted = True
        self.halt_reason = reason

    def add_error(self, error: str) -> None:
        """Record a step failure."""
        self.errors.append(error)

    def to_summary_dict(self) -> dict[str, Any]:
        """Compact summary for logging / API responses."""
        return {
            "run_id": self.run_id,
            "submitter": self.submitter,
            "dataset_file": self.dataset_file,
            "change_set_kind": self.change_set_kind,
            "touched_files": self.change_set.touched_files if self.change_set else [],
            "operations": len(self.patch.diff) if self.patch else 0,
            "verdict": self.verdict.to_dict() if self.verdict else None,
            "halted": self.halted,
            "halt_reason": self.halt_reason,
            "passed": self.passed,
            "steps_completed": len(self.step_results),
            "total_steps": self.total_steps,
            "errors": self.errors,
        }
