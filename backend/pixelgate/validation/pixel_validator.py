"""
PatchValidator — decides whether a structured patch is an allowable
single-pixel contribution.

Decision procedure:
    - One operation:  add → new-pixel checks, remove → rejected,
      replace/test → update checks.
    - Otherwise:      every operation must target the same record (and
      must not delete claimed records), the diff must not be empty, then
      the first operation drives the update checks.

Structural and ownership checks stop at the first problem.  The
new-pixel checks run all four field rules so a contributor sees every
problem with their record at once.
"""

from __future__ import annotations

import math
from typing import Any

from pixelgate.core.config import settings
from pixelgate.core.constants import RejectionCategory
from pixelgate.core.logging import get_logger
from pixelgate.patch.errors import MalformedPathError
from pixelgate.patch.paths import RecordPath
from pixelgate.patch.schema import (
    AddOperation,
    PixelRecord,
    RemoveOperation,
    ReplaceOperation,
    StructuredPatch,
    TestOperation,
)
from pixelgate.validation import messages
from pixelgate.validation.verdict import ReasonCollector, Verdict

logger = get_logger(__name__)

USERNAME_FIELD = "username"


def _is_valid_coordinate(value: Any) -> bool:
    """A finite, non-negative JSON number (booleans don't count)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if isinstance(value, float) and not math.isfinite(value):
        return False
    return value >= 0


class PatchValidator:
    """
    Validates a structured patch against the identity of its submitter.

    Usage::

        validator = PatchValidator()
        verdict = validator.evaluate(patch, "alice")
        if not verdict.ok:
            for text in verdict.messages:
                ...
    """

    def __init__(
        self,
        unclaimed_username: str | None = None,
        sync_fork_help_url: str | None = None,
    ) -> None:
        self.unclaimed_username = settings.UNCLAIMED_USERNAME if unclaimed_username is None else unclaimed_username
        self.sync_fork_help_url = settings.SYNC_FORK_HELP_URL if sync_fork_help_url is None else sync_fork_help_url

    def evaluate(self, patch: StructuredPatch, submitter: str) -> Verdict:
        """Return the verdict for `patch` submitted by `submitter`."""
        reasons = ReasonCollector()

        try:
            ok = self._evaluate(patch, submitter, reasons)
        except MalformedPathError as exc:
            reasons.reject(RejectionCategory.STRUCTURAL, messages.malformed_path(exc.path))
            ok = False

        verdict = reasons.verdict(ok)
        logger.info(
            "Patch evaluated",
            submitter=submitter,
            operations=len(patch.diff),
            ok=verdict.ok,
            reasons=verdict.messages,
        )
        return verdict

    def _evaluate(self, patch: StructuredPatch, submitter: str, reasons: ReasonCollector) -> bool:
        diff = patch.diff

        if len(diff) == 1:
            operation = diff[0]
            if isinstance(operation, AddOperation):
                record = PixelRecord.from_value(operation.value)
                return self.is_valid_new_pixel_submission(record, submitter, reasons)
            if isinstance(operation, RemoveOperation):
                reasons.reject(RejectionCategory.OWNERSHIP, messages.REMOVE_PIXEL)
                return False
            if isinstance(operation, (ReplaceOperation, TestOperation)):
                return self.is_valid_pixel_update(patch, operation, submitter, reasons)

            # Unreachable while DiffOperation holds only the four kinds above.
            reasons.reject(RejectionCategory.STRUCTURAL, messages.ONE_PIXEL_PER_USER)
            return False

        if not self.all_patches_are_for_the_same_pixel(patch, reasons):
            return False

        if not diff:
            reasons.reject(RejectionCategory.STRUCTURAL, messages.EMPTY_PATCH)
            return False

        return self.is_valid_pixel_update(patch, diff[0], submitter, reasons)

    # ─── Same-record check ─────────────────────────────

    def all_patches_are_for_the_same_pixel(
        self,
        patch: StructuredPatch,
        reasons: ReasonCollector,
    ) -> bool:
        """
        True if every operation targets the same record and no claimed
        record is being deleted.  Deleted claimed records are reported
        first, regardless of the indices involved.
        """
        removed_owners = []
        for operation in patch.diff:
            if not isinstance(operation, RemoveOperation):
                continue
            removed = patch.before.record_at(operation.record_path.record_index)
            if removed.username != self.unclaimed_username:
                removed_owners.append(removed.username)

        if removed_owners:
            logger.warning("Patch deletes claimed records", usernames=removed_owners)
            reasons.reject(
                RejectionCategory.OWNERSHIP,
                messages.accidental_deletion(self.sync_fork_help_url),
            )
            reasons.reject(RejectionCategory.OWNERSHIP, messages.missing_usernames(removed_owners))
            return False

        current_index = None
        for operation in patch.diff:
            index = operation.record_path.record_index
            if current_index is None:
                current_index = index
            if index != current_index:
                reasons.reject(RejectionCategory.STRUCTURAL, messages.SAME_ROW)
                return False

        return True

    # ─── Update check ──────────────────────────────────

    def is_valid_pixel_update(
        self,
        patch: StructuredPatch,
        operation: Any,
        submitter: str,
        reasons: ReasonCollector,
    ) -> bool:
        """
        Validate the record touched by `operation` in its after-state.

        Claiming a record (changing its username) is only allowed when the
        record was unclaimed and the new owner is the submitter.
        """
        target = operation.record_path
        new_entry = patch.after.record_at(target.record_index)

        if self._changes_username(patch, target, new_entry):
            old_entry = patch.before.record_at(target.record_index)
            if old_entry.username != self.unclaimed_username:
                reasons.reject(RejectionCategory.OWNERSHIP, messages.OVERRIDE_PIXEL)
                return False
            if new_entry.username != submitter:
                reasons.reject(
                    RejectionCategory.IDENTITY,
                    messages.username_mismatch(submitter, new_entry.username),
                )
                return False

        return self.is_valid_new_pixel_submission(new_entry, submitter, reasons)

    def _changes_username(
        self,
        patch: StructuredPatch,
        target: RecordPath,
        new_entry: PixelRecord,
    ) -> bool:
        if not target.targets_whole_record:
            return target.field_name == USERNAME_FIELD
        # Whole-record operations change the owner if the username differs.
        if not patch.before.has_record(target.record_index):
            return False
        return patch.before.record_at(target.record_index).username != new_entry.username

    # ─── New-pixel check ───────────────────────────────

    def is_valid_new_pixel_submission(
        self,
        pixel: PixelRecord,
        submitter: str,
        reasons: ReasonCollector,
    ) -> bool:
        """Check all four field rules; every failing rule adds a reason."""
        result = True

        if pixel.username != submitter:
            reasons.reject(
                RejectionCategory.IDENTITY,
                messages.username_mismatch(submitter, pixel.username),
            )
            result = False

        if not pixel.color:
            reasons.reject(RejectionCategory.FIELD, messages.MISSING_COLOR)
            result = False

        if not _is_valid_coordinate(pixel.x):
            reasons.reject(RejectionCategory.FIELD, messages.INVALID_X)
            result = False

        if not _is_valid_coordinate(pixel.y):
            reasons.reject(RejectionCategory.FIELD, messages.INVALID_Y)
            result = False

        return result


def evaluate_pixel_changes(patch: StructuredPatch, submitter: str) -> Verdict:
    """Evaluate `patch` with a validator built from application settings."""
    return PatchValidator().evaluate(patch, submitter)


def unsupported_operation_verdict() -> Verdict:
    """Verdict for a diff using an operation kind other than add/remove/replace/test."""
    reasons = ReasonCollector()
    reasons.reject(RejectionCategory.STRUCTURAL, messages.ONE_PIXEL_PER_USER)
    return reasons.verdict(False)
