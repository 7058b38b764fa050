"""API schema package."""

from pixelgate.api.schemas.reviews import (
    PatchCheckRequest,
    ReportEntryResponse,
    ReviewResponse,
    VerdictResponse,
)

__all__ = ["PatchCheckRequest", "VerdictResponse", "ReportEntryResponse", "ReviewResponse"]
