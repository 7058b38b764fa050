"""
Review pipeline — runs one pull request through the change-set gate,
the patch validator, and the acknowledgement, step by step, with
per-step logging and error handling.
"""

from pixelgate.pipeline.context import ReviewContext, StepResult
from pixelgate.pipeline.engine import ReviewEngine, ReviewResult
from pixelgate.pipeline.step import ReviewStep

__all__ = ["ReviewEngine", "ReviewResult", "ReviewContext", "ReviewStep", "StepResult"]
