"""
AcknowledgeSubmissionStep — thanks the contributor once the patch passed.
"""

from __future__ import annotations

from pixelgate.pipeline.context import ReviewContext, StepResult
from pixelgate.pipeline.step import ReviewStep
from pixelgate.validation import messages


class AcknowledgeSubmissionStep(ReviewStep):
    """Post the thank-you message."""

    name = "acknowledge_submission"
    description = "Thank the contributor"

    async def should_skip(self, ctx: ReviewContext) -> bool:
        return not ctx.passed

    async def execute(self, ctx: ReviewContext) -> StepResult:
        started_at = self._now()
        await ctx.reporter.message(messages.THANK_YOU)
        return self._success(started_at)
