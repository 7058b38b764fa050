"""End-to-end runs of the review pipeline against in-memory pull requests."""

from __future__ import annotations

import pytest

from pixelgate.changeset.classifier import ChangeSetClassifier
from pixelgate.changeset.schema import ChangeSet
from pixelgate.core.constants import ReportKind, ReviewStatus, StepStatus
from pixelgate.ingestion.pull_request_source import EventPullRequestSource, PullRequestSource
from pixelgate.pipeline.engine import ReviewEngine
from pixelgate.pipeline.flow import default_review_flow
from pixelgate.reporting.reporter import CollectingReporter
from pixelgate.validation import messages
from pixelgate.validation.pixel_validator import PatchValidator

DATASET_FILE = "_data/pixels.json"
UNCLAIMED = "<UNCLAIMED>"


def _event(diff, before, after, *, submitter="alice", files=None, lines=2) -> dict:
    return {
        "submitter": submitter,
        "change_set": {"modified_files": files or [DATASET_FILE], "lines_of_code": lines},
        "patches": {DATASET_FILE: {"before": {"data": before}, "after": {"data": after}, "diff": diff}},
    }


def _claim_event(**kwargs) -> dict:
    return _event(
        [
            {"op": "replace", "path": "/data/1/username", "value": "alice"},
            {"op": "replace", "path": "/data/1/color", "value": "#ff00ff"},
        ],
        before=[
            {"x": 0, "y": 0, "color": "#000", "username": "bob"},
            {"x": 1, "y": 0, "color": "#fff", "username": UNCLAIMED},
        ],
        after=[
            {"x": 0, "y": 0, "color": "#000", "username": "bob"},
            {"x": 1, "y": 0, "color": "#ff00ff", "username": "alice"},
        ],
        **kwargs,
    )


def _statuses(result) -> dict[str, str]:
    return {sr["step_name"]: sr["status"] for sr in result.step_results}


class SpyValidator(PatchValidator):
    def __init__(self) -> None:
        super().__init__()
        self.calls = 0

    def evaluate(self, patch, submitter):
        self.calls += 1
        return super().evaluate(patch, submitter)


class BrokenSource(PullRequestSource):
    async def submitter(self) -> str:
        raise ConnectionError("hosting service unavailable")

    async def change_set(self) -> ChangeSet:
        raise AssertionError("not reached")

    async def json_patch_for_file(self, path: str) -> dict:
        raise AssertionError("not reached")


# ---------------------------------------------------------------------------
# Accepted contributions
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_valid_claim_passes_and_thanks_contributor():
    reporter = CollectingReporter()

    result = await ReviewEngine().run(EventPullRequestSource.from_dict(_claim_event()), reporter)

    assert result.status == ReviewStatus.COMPLETED
    assert result.passed
    assert reporter.failures == []
    assert reporter.messages == [messages.THANK_YOU]
    assert result.verdict == {"ok": True, "reasons": []}
    assert all(status == StepStatus.COMPLETED for status in _statuses(result).values())
    assert result.steps_completed == result.total_steps == 6


@pytest.mark.asyncio
async def test_run_id_is_kept_when_given():
    result = await ReviewEngine().run(
        EventPullRequestSource.from_dict(_claim_event()),
        run_id="run-123",
    )

    assert result.run_id == "run-123"
    assert result.context_summary["submitter"] == "alice"


# ---------------------------------------------------------------------------
# Change-set gate
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_empty_pull_request_fails_without_reading_patch():
    event = {"submitter": "alice", "change_set": {"lines_of_code": 0}, "patches": {}}
    reporter = CollectingReporter()

    result = await ReviewEngine().run(EventPullRequestSource.from_dict(event), reporter)

    assert result.status == ReviewStatus.COMPLETED
    assert not result.passed
    assert reporter.failures == [messages.EMPTY_PULL_REQUEST]
    statuses = _statuses(result)
    assert statuses["load_patch"] == StepStatus.SKIPPED
    assert statuses["acknowledge_submission"] == StepStatus.SKIPPED


@pytest.mark.asyncio
async def test_extra_files_need_manual_review_and_skip_validator():
    spy = SpyValidator()
    engine = ReviewEngine(flow_builder=lambda: default_review_flow(validator=spy))
    reporter = CollectingReporter()
    event = _claim_event(files=[DATASET_FILE, "README.md"], lines=7)

    result = await engine.run(EventPullRequestSource.from_dict(event), reporter)

    assert not result.passed
    assert result.status == ReviewStatus.COMPLETED
    assert reporter.failures == [ChangeSetClassifier().multiple_files_failure()]
    assert len(reporter.markdowns) == 1
    assert "- README.md" in reporter.markdowns[0]
    assert reporter.messages == []
    assert _statuses(result)["validate_patch"] == StepStatus.SKIPPED
    assert spy.calls == 0


# ---------------------------------------------------------------------------
# Rejected patches
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_rejected_patch_reports_each_reason_as_failure():
    event = _event(
        [{"op": "add", "path": "/data/0", "value": {"x": -1, "y": 0, "color": "", "username": "bob"}}],
        before=[],
        after=[{"x": -1, "y": 0, "color": "", "username": "bob"}],
    )
    reporter = CollectingReporter()

    result = await ReviewEngine().run(EventPullRequestSource.from_dict(event), reporter)

    assert result.status == ReviewStatus.COMPLETED
    assert not result.passed
    assert reporter.failures == [
        messages.username_mismatch("alice", "bob"),
        messages.MISSING_COLOR,
        messages.INVALID_X,
    ]
    assert reporter.messages == []
    assert _statuses(result)["acknowledge_submission"] == StepStatus.SKIPPED
    assert [r["category"] for r in result.verdict["reasons"]] == ["IDENTITY", "FIELD", "FIELD"]


@pytest.mark.asyncio
async def test_unsupported_operation_is_reported_as_one_pixel_per_user():
    event = _event(
        [{"op": "move", "from": "/data/0", "path": "/data/1"}],
        before=[{"x": 0, "y": 0, "color": "#000", "username": "alice"}],
        after=[{"x": 0, "y": 0, "color": "#000", "username": "alice"}],
    )
    reporter = CollectingReporter()

    result = await ReviewEngine().run(EventPullRequestSource.from_dict(event), reporter)

    assert result.status == ReviewStatus.COMPLETED
    assert not result.passed
    assert reporter.failures == [messages.ONE_PIXEL_PER_USER]
    assert _statuses(result)["validate_patch"] == StepStatus.SKIPPED


@pytest.mark.asyncio
async def test_report_renders_failures_before_messages():
    reporter = CollectingReporter()
    await reporter.message("hello")
    await reporter.fail("broken")
    await reporter.markdown("## FAQ")

    rendered = reporter.render()

    assert rendered.index("### Fails") < rendered.index("### Messages") < rendered.index("## FAQ")
    assert reporter.texts(ReportKind.FAIL) == ["broken"]


# ---------------------------------------------------------------------------
# Collaborator failures
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_source_error_marks_review_failed():
    reporter = CollectingReporter()

    result = await ReviewEngine().run(BrokenSource(), reporter)

    assert result.status == ReviewStatus.FAILED
    assert not result.passed
    assert "hosting service unavailable" in result.error
    assert reporter.entries == []
    assert result.steps_completed == 0


@pytest.mark.asyncio
async def test_missing_patch_marks_review_failed():
    event = _claim_event()
    event["patches"] = {}

    result = await ReviewEngine().run(EventPullRequestSource.from_dict(event))

    assert result.status == ReviewStatus.FAILED
    assert _statuses(result)["load_patch"] == StepStatus.FAILED
    assert DATASET_FILE in result.error


@pytest.mark.asyncio
async def test_malformed_patch_marks_review_failed():
    event = _claim_event()
    event["patches"][DATASET_FILE]["diff"] = [{"op": "replace", "value": "#fff"}]

    result = await ReviewEngine().run(EventPullRequestSource.from_dict(event))

    assert result.status == ReviewStatus.FAILED
    assert result.step_results[-1]["step_name"] == "load_patch"
    assert "errors" in result.step_results[-1]["metadata"]


@pytest.mark.asyncio
async def test_patch_referencing_missing_record_marks_review_failed():
    event = _event(
        [{"op": "replace", "path": "/data/4/color", "value": "#fff"}],
        before=[{"x": 0, "y": 0, "color": "#000", "username": "alice"}],
        after=[{"x": 0, "y": 0, "color": "#fff", "username": "alice"}],
    )

    result = await ReviewEngine().run(EventPullRequestSource.from_dict(event))

    assert result.status == ReviewStatus.FAILED
    assert _statuses(result)["validate_patch"] == StepStatus.FAILED
