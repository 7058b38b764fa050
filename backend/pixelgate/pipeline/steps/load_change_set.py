"""
LoadChangeSetStep — reads the submitter and change set from the
pull-request source and classifies the change set.
"""

from __future__ import annotations

from pixelgate.changeset.classifier import ChangeSetClassifier
from pixelgate.core.logging import get_logger
from pixelgate.pipeline.context import ReviewContext, StepResult
from pixelgate.pipeline.step import ReviewStep

logger = get_logger(__name__)


class LoadChangeSetStep(ReviewStep):
    """Fetch who opened the pull request and which files it touches."""

    name = "load_change_set"
    description = "Load submitter and change set from the pull request"

    def __init__(self, classifier: ChangeSetClassifier) -> None:
        self.classifier = classifier

    async def execute(self, ctx: ReviewContext) -> StepResult:
        started_at = self._now()

        # Collaborator failures propagate; the engine marks the run FAILED.
        ctx.submitter = await ctx.source.submitter()
        ctx.change_set = await ctx.source.change_set()
        ctx.change_set_kind = self.classifier.classify(ctx.change_set)

        logger.info(
            "Change set loaded",
            submitter=ctx.submitter,
            kind=ctx.change_set_kind,
        )

        return self._success(started_at, metadata={
            "submitter": ctx.submitter,
            "kind": ctx.change_set_kind,
            "lines_of_code": ctx.change_set.lines_of_code,
            "touched_files": ctx.change_set.touched_files,
        })
