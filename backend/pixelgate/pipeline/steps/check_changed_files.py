"""
CheckChangedFilesStep — only the dataset file may be touched.

Anything else (other files modified, files created or deleted) sends
the pull request to manual review with a FAQ listing every touched
file.  The patch validator never runs for such pull requests.
"""

from __future__ import annotations

from pixelgate.changeset.classifier import ChangeSetClassifier
from pixelgate.core.constants import ChangeSetKind
from pixelgate.core.logging import get_logger
from pixelgate.pipeline.context import ReviewContext, StepResult
from pixelgate.pipeline.step import ReviewStep

logger = get_logger(__name__)


class CheckChangedFilesStep(ReviewStep):
    """Flag pull requests touching more than the dataset file."""

    name = "check_changed_files"
    description = "Ensure only the dataset file is modified"

    def __init__(self, classifier: ChangeSetClassifier) -> None:
        self.classifier = classifier

    async def execute(self, ctx: ReviewContext) -> StepResult:
        started_at = self._now()

        if ctx.change_set_kind != ChangeSetKind.FOREIGN_FILES:
            return self._success(started_at, metadata={"foreign_files": []})

        touched = ctx.change_set.touched_files
        foreign = [name for name in touched if name != self.classifier.dataset_file]

        logger.warning(
            "Pull request touches more than the dataset file",
            touched_files=touched,
            created_files=ctx.change_set.created_files,
            deleted_files=ctx.change_set.deleted_files,
        )

        failure = self.classifier.multiple_files_failure()
        await ctx.reporter.fail(failure)
        await ctx.reporter.markdown(self.classifier.explain_multiple_file_changes(ctx.change_set))
        ctx.halt(failure)

        return self._success(started_at, metadata={"foreign_files": foreign})
