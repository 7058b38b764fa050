"""
CheckEmptyChangeStep — pull requests without any changed line go to a human.
"""

from __future__ import annotations

from pixelgate.core.constants import ChangeSetKind
from pixelgate.core.logging import get_logger
from pixelgate.pipeline.context import ReviewContext, StepResult
from pixelgate.pipeline.step import ReviewStep
from pixelgate.validation import messages

logger = get_logger(__name__)


class CheckEmptyChangeStep(ReviewStep):
    """Flag an empty change set for manual review."""

    name = "check_empty_change"
    description = "Flag empty pull requests for manual review"

    async def execute(self, ctx: ReviewContext) -> StepResult:
        started_at = self._now()

        if ctx.change_set_kind != ChangeSetKind.EMPTY:
            return self._success(started_at, metadata={"empty": False})

        logger.warning("Empty pull request", submitter=ctx.submitter)
        await ctx.reporter.fail(messages.EMPTY_PULL_REQUEST)
        ctx.halt(messages.EMPTY_PULL_REQUEST)

        return self._success(started_at, metadata={"empty": True})
