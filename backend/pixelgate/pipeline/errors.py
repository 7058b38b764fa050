"""
Domain-specific exception hierarchy for the review pipeline.

All pipeline exceptions inherit from PipelineError so callers can
catch broadly or narrowly as needed.  Each exception carries structured
context (step name, run ID, etc.) for logging/debugging.
"""

from __future__ import annotations


class PipelineError(Exception):
    """Base exception for all pipeline errors."""

    def __init__(
        self,
        message: str,
        *,
        run_id: str | None = None,
        step_name: str | None = None,
        details: dict | None = None,
    ) -> None:
        self.run_id = run_id
        self.step_name = step_name
        self.details = details or {}
        super().__init__(message)


class StepExecutionError(PipelineError):
    """A step failed during execution."""
    pass


class CollaboratorError(PipelineError):
    """A pull-request source or reporter could not deliver what was asked."""
    pass
