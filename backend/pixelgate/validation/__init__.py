"""
Validation package — decides whether a pixel contribution is acceptable.
"""

from pixelgate.validation.pixel_validator import (
    PatchValidator,
    evaluate_pixel_changes,
    unsupported_operation_verdict,
)
from pixelgate.validation.verdict import ReasonCollector, Rejection, Verdict

__all__ = [
    "PatchValidator",
    "evaluate_pixel_changes",
    "unsupported_operation_verdict",
    "Verdict",
    "Rejection",
    "ReasonCollector",
]
