"""
ValidatePatchStep — runs the patch validator and reports every
rejection reason as a failure.
"""

from __future__ import annotations

from pixelgate.core.logging import get_logger
from pixelgate.patch.errors import PatchFormatError
from pixelgate.pipeline.context import ReviewContext, StepResult
from pixelgate.pipeline.errors import StepExecutionError
from pixelgate.pipeline.step import ReviewStep
from pixelgate.validation.pixel_validator import PatchValidator

logger = get_logger(__name__)


class ValidatePatchStep(ReviewStep):
    """Decide whether the patch is an allowable single-pixel change."""

    name = "validate_patch"
    description = "Validate the single-pixel contribution"

    def __init__(self, validator: PatchValidator) -> None:
        self.validator = validator

    async def execute(self, ctx: ReviewContext) -> StepResult:
        started_at = self._now()

        try:
            verdict = self.validator.evaluate(ctx.patch, ctx.submitter)
        except PatchFormatError as exc:
            raise StepExecutionError(
                f"Patch could not be evaluated: {exc}",
                run_id=ctx.run_id,
                step_name=self.name,
                details=exc.details,
            ) from exc

        ctx.verdict = verdict
        for reason in verdict.reasons:
            await ctx.reporter.fail(reason.text)

        if not verdict.ok:
            ctx.halt("Patch rejected")

        return self._success(started_at, metadata={
            "ok": verdict.ok,
            "reasons": [r.category for r in verdict.reasons],
        })
