"""Review request/response schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from pixelgate.core.constants import RejectionCategory, ReportKind, ReviewStatus


class PatchCheckRequest(BaseModel):
    """Request payload for validating a bare structured patch."""

    submitter: str = Field(..., min_length=1)
    patch: dict[str, Any]


class RejectionResponse(BaseModel):
    category: RejectionCategory
    text: str


class VerdictResponse(BaseModel):
    """Outcome of the patch validator."""

    ok: bool
    reasons: list[RejectionResponse] = Field(default_factory=list)


class ReportEntryResponse(BaseModel):
    kind: ReportKind
    text: str


class ReviewResponse(BaseModel):
    """Outcome of a full pull-request review."""

    run_id: str
    status: ReviewStatus
    passed: bool
    verdict: VerdictResponse | None = None
    report: list[ReportEntryResponse] = Field(default_factory=list)
    rendered: str = ""
    steps: list[dict[str, Any]] = Field(default_factory=list)
    error: str | None = None
