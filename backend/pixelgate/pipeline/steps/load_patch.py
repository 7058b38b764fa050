"""
LoadPatchStep — fetches the structured patch for the dataset file and
parses it into the typed patch model.
"""

from __future__ import annotations

from pixelgate.core.logging import get_logger
from pixelgate.patch.errors import PatchFormatError, UnsupportedOperationError
from pixelgate.patch.schema import StructuredPatch
from pixelgate.pipeline.context import ReviewContext, StepResult
from pixelgate.pipeline.errors import StepExecutionError
from pixelgate.pipeline.step import ReviewStep
from pixelgate.validation import messages
from pixelgate.validation.pixel_validator import unsupported_operation_verdict

logger = get_logger(__name__)


class LoadPatchStep(ReviewStep):
    """Load and parse the dataset file's structured patch."""

    name = "load_patch"
    description = "Load structured patch for the dataset file"

    async def execute(self, ctx: ReviewContext) -> StepResult:
        started_at = self._now()

        raw = await ctx.source.json_patch_for_file(ctx.dataset_file)

        try:
            ctx.patch = StructuredPatch.parse(raw)

        except UnsupportedOperationError as exc:
            # Anything but add/remove/replace/test is more than a pixel edit.
            logger.warning("Unsupported diff operation", op=exc.op)
            ctx.verdict = unsupported_operation_verdict()
            await ctx.reporter.fail(messages.ONE_PIXEL_PER_USER)
            ctx.halt(messages.ONE_PIXEL_PER_USER)
            return self._success(started_at, metadata={"unsupported_op": str(exc.op)})

        except PatchFormatError as exc:
            raise StepExecutionError(
                f"Structured patch for {ctx.dataset_file} is malformed: {exc}",
                run_id=ctx.run_id,
                step_name=self.name,
                details=exc.details,
            ) from exc

        logger.info(
            "Structured patch loaded",
            file=ctx.dataset_file,
            operations=len(ctx.patch.diff),
            ops=[op.op for op in ctx.patch.diff],
        )

        return self._success(started_at, metadata={
            "operations": len(ctx.patch.diff),
            "records_before": len(ctx.patch.before.data),
            "records_after": len(ctx.patch.after.data),
        })
