"""
Review endpoints — run a pull request (or a bare patch) through the
validator and return what the contributor would be told.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from pixelgate.api.schemas.reviews import PatchCheckRequest, ReviewResponse, VerdictResponse
from pixelgate.core.logging import get_logger
from pixelgate.ingestion.pull_request_source import EventPullRequestSource, PullRequestEvent
from pixelgate.patch.errors import PatchFormatError, UnsupportedOperationError
from pixelgate.patch.schema import StructuredPatch
from pixelgate.pipeline.engine import ReviewEngine
from pixelgate.reporting.reporter import CollectingReporter
from pixelgate.validation.pixel_validator import PatchValidator, unsupported_operation_verdict

logger = get_logger(__name__)

router = APIRouter(prefix="/reviews", tags=["Reviews"])


# ─── Full review ──────────────────────────────────────────
@router.post("", response_model=ReviewResponse)
async def review_pull_request(event: PullRequestEvent) -> ReviewResponse:
    """
    Review one pull request.

    Runs the change-set gate, the patch validator and the
    acknowledgement, and returns every reported entry in order.
    """
    reporter = CollectingReporter()
    result = await ReviewEngine().run(EventPullRequestSource(event), reporter)

    return ReviewResponse(
        run_id=result.run_id,
        status=result.status,
        passed=result.passed,
        verdict=result.verdict,
        report=reporter.to_list(),
        rendered=reporter.render(),
        steps=result.step_results,
        error=result.error,
    )


# ─── Bare patch ───────────────────────────────────────────
@router.post("/patch", response_model=VerdictResponse)
async def validate_patch(request: PatchCheckRequest) -> VerdictResponse:
    """Validate a structured patch without the change-set gate."""
    try:
        patch = StructuredPatch.parse(request.patch)
    except UnsupportedOperationError:
        return VerdictResponse.model_validate(unsupported_operation_verdict().to_dict())
    except PatchFormatError as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    try:
        verdict = PatchValidator().evaluate(patch, request.submitter)
    except PatchFormatError as exc:
        logger.warning("Patch could not be evaluated", error=str(exc))
        raise HTTPException(status_code=422, detail=str(exc))

    return VerdictResponse.model_validate(verdict.to_dict())
