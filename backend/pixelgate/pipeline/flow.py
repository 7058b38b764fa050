"""
Review flow — the ordered step sequence for a pull request.

    load change set → empty? → only the dataset file? →
    load patch → validate → thank the contributor

Gate steps halt the run on rejection; the rest skip themselves.
"""

from __future__ import annotations

from pixelgate.changeset.classifier import ChangeSetClassifier
from pixelgate.pipeline.step import ReviewStep
from pixelgate.pipeline.steps.acknowledge_submission import AcknowledgeSubmissionStep
from pixelgate.pipeline.steps.check_changed_files import CheckChangedFilesStep
from pixelgate.pipeline.steps.check_empty_change import CheckEmptyChangeStep
from pixelgate.pipeline.steps.load_change_set import LoadChangeSetStep
from pixelgate.pipeline.steps.load_patch import LoadPatchStep
from pixelgate.pipeline.steps.validate_patch import ValidatePatchStep
from pixelgate.validation.pixel_validator import PatchValidator


def default_review_flow(
    validator: PatchValidator | None = None,
    classifier: ChangeSetClassifier | None = None,
) -> list[ReviewStep]:
    """Build the step list used for every pull request."""
    classifier = classifier or ChangeSetClassifier()
    validator = validator or PatchValidator()
    return [
        LoadChangeSetStep(classifier),
        CheckEmptyChangeStep(),
        CheckChangedFilesStep(classifier),
        LoadPatchStep(),
        ValidatePatchStep(validator),
        AcknowledgeSubmissionStep(),
    ]
