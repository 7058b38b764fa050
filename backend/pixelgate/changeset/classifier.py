"""
ChangeSetClassifier — the outer gate in front of the patch validator.

Only pull requests that modify the dataset file and nothing else are
validated automatically; everything else goes to a human.
"""

from __future__ import annotations

from pixelgate.changeset.schema import ChangeSet
from pixelgate.core.config import settings
from pixelgate.core.constants import ChangeSetKind
from pixelgate.core.logging import get_logger
from pixelgate.validation import messages

logger = get_logger(__name__)


class ChangeSetClassifier:
    """Sorts a change set into empty / foreign files / dataset only."""

    def __init__(
        self,
        dataset_file: str | None = None,
        git_help_url: str | None = None,
    ) -> None:
        self.dataset_file = settings.DATASET_FILE if dataset_file is None else dataset_file
        self.git_help_url = settings.GIT_RESOLUTION_HELP_URL if git_help_url is None else git_help_url

    def has_only_pixel_changes(self, change_set: ChangeSet) -> bool:
        return (
            change_set.modified_files == [self.dataset_file]
            and not change_set.created_files
            and not change_set.deleted_files
        )

    def classify(self, change_set: ChangeSet) -> ChangeSetKind:
        if change_set.lines_of_code == 0:
            kind = ChangeSetKind.EMPTY
        elif not self.has_only_pixel_changes(change_set):
            kind = ChangeSetKind.FOREIGN_FILES
        else:
            kind = ChangeSetKind.DATASET_ONLY

        logger.info(
            "Change set classified",
            kind=kind,
            lines_of_code=change_set.lines_of_code,
            touched_files=change_set.touched_files,
        )
        return kind

    def multiple_files_failure(self) -> str:
        return messages.multiple_files(self.dataset_file)

    def explain_multiple_file_changes(self, change_set: ChangeSet) -> str:
        """Markdown FAQ enumerating every file the pull request touches."""
        return messages.multiple_files_faq(
            self.dataset_file,
            change_set.touched_files,
            self.git_help_url,
        )
