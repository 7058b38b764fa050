"""
ReviewEngine — the orchestrator that runs review steps sequentially.

Responsibilities:
    - Build the ReviewContext for one pull request
    - Execute each step with timing, logging, and error handling
    - Stop at the first failed step (no retries)
    - Return a complete ReviewResult

One engine run handles exactly one pull request.  Steps are awaited one
after another; nothing runs concurrently.
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Callable

import structlog

from pixelgate.core.constants import ReviewStatus, StepStatus
from pixelgate.pipeline.context import ReviewContext, StepResult
from pixelgate.pipeline.errors import StepExecutionError
from pixelgate.pipeline.flow import default_review_flow
from pixelgate.pipeline.step import ReviewStep
from pixelgate.reporting.reporter import CollectingReporter, Reporter

if TYPE_CHECKING:
    from pixelgate.ingestion.pull_request_source import PullRequestSource


@dataclass
class ReviewResult:
    """Final outcome of a review run."""

    run_id: str
    status: str                     # ReviewStatus value
    passed: bool = False
    started_at: datetime | None = None
    completed_at: datetime | None = None
    total_duration_ms: int = 0
    steps_completed: int = 0
    total_steps: int = 0
    step_results: list[dict[str, Any]] = field(default_factory=list)
    verdict: dict[str, Any] | None = None
    context_summary: dict[str, Any] = field(default_factory=dict)
    error: str | None = None


class ReviewEngine:
    """
    Runs a sequence of ReviewStep objects against a ReviewContext.

    Usage::

        engine = ReviewEngine()
        reporter = CollectingReporter()
        result = await engine.run(source, reporter)
        print(reporter.render())
    """

    def __init__(
        self,
        flow_builder: Callable[[], list[ReviewStep]] | None = None,
        dataset_file: str | None = None,
    ) -> None:
        self.flow_builder = flow_builder or default_review_flow
        self.dataset_file = dataset_file
        self.logger = structlog.get_logger("pipeline.engine")

    async def run(
        self,
        source: PullRequestSource,
        reporter: Reporter | None = None,
        run_id: str | None = None,
    ) -> ReviewResult:
        """
        Full review of one pull request.

        Args:
            source: Where the submitter, change set and patch come from.
            reporter: Receives messages/failures; defaults to a CollectingReporter.
            run_id: Optional identifier (a fresh UUID otherwise).
        """
        started_at = datetime.now(timezone.utc)

        ctx = ReviewContext(source=source, reporter=reporter or CollectingReporter())
        if run_id:
            ctx.run_id = run_id
        if self.dataset_file:
            ctx.dataset_file = self.dataset_file

        log = self.logger.bind(run_id=ctx.run_id, dataset_file=ctx.dataset_file)
        log.info("Review started")

        result = await self.run_steps(ctx, self.flow_builder())
        result.started_at = started_at

        log.info(
            "Review finished",
            status=result.status,
            passed=result.passed,
            steps_completed=result.steps_completed,
            total_steps=result.total_steps,
            duration_ms=result.total_duration_ms,
        )

        return result

    async def run_steps(
        self,
        ctx: ReviewContext,
        steps: list[ReviewStep],
    ) -> ReviewResult:
        """
        Execute an ordered list of steps against a context.

        Can be called directly with a pre-built step list (e.g. in tests).
        """
        started_at = datetime.now(timezone.utc)
        ctx.total_steps = len(steps)

        log = self.logger.bind(run_id=ctx.run_id, total_steps=len(steps))

        review_status = ReviewStatus.RUNNING
        steps_completed = 0
        error = None

        for index, step in enumerate(steps):
            ctx.current_step_index = index
            step_number = index + 1

            step_log = log.bind(
                step_name=step.name,
                step_index=step_number,
                step_description=step.description,
            )

            # ── Check skip condition ──────────────────
            if await step.should_skip(ctx):
                step_log.debug("Step skipped", halt_reason=ctx.halt_reason)
                now = datetime.now(timezone.utc)
                ctx.step_results.append(StepResult(
                    step_name=step.name,
                    status=StepStatus.SKIPPED,
                    started_at=now,
                    completed_at=now,
                ))
                steps_completed += 1
                continue

            # ── Execute step ──────────────────────────
            step_log.info(f"Step {step_number}/{len(steps)}: {step.description}")

            result = await self._execute(step, ctx, step_log)
            ctx.step_results.append(result)

            if result.status == StepStatus.COMPLETED:
                steps_completed += 1
                step_log.info(
                    "Step completed",
                    duration_ms=result.duration_ms,
                    metadata=result.metadata,
                )
            else:
                step_log.error(
                    "Step failed — review stopping",
                    error=result.error,
                    duration_ms=result.duration_ms,
                )
                ctx.add_error(f"Step '{step.name}' failed: {result.error}")
                review_status = ReviewStatus.FAILED
                error = result.error
                break

        # ── Finalise ──────────────────────────────────
        completed_at = datetime.now(timezone.utc)
        total_duration_ms = int((completed_at - started_at).total_seconds() * 1000)

        if review_status != ReviewStatus.FAILED:
            review_status = ReviewStatus.COMPLETED

        return ReviewResult(
            run_id=ctx.run_id,
            status=review_status,
            passed=review_status == ReviewStatus.COMPLETED and ctx.passed,
            started_at=started_at,
            completed_at=completed_at,
            total_duration_ms=total_duration_ms,
            steps_completed=steps_completed,
            total_steps=len(steps),
            step_results=[sr.to_dict() for sr in ctx.step_results],
            verdict=ctx.verdict.to_dict() if ctx.verdict else None,
            context_summary=ctx.to_summary_dict(),
            error=error,
        )

    async def _execute(
        self,
        step: ReviewStep,
        ctx: ReviewContext,
        log: structlog.BoundLogger,
    ) -> StepResult:
        """Execute a step once.  Failures are recorded, never retried."""
        started_at = datetime.now(timezone.utc)
        try:
            return await step.execute(ctx)

        except StepExecutionError as exc:
            return StepResult(
                step_name=step.name,
                status=StepStatus.FAILED,
                started_at=started_at,
                completed_at=datetime.now(timezone.utc),
                error=str(exc),
                metadata=exc.details,
            )

        except Exception as exc:
            # Collaborator failure or bug: fatal for this run
            log.exception("Unexpected error in step", error=str(exc))
            return StepResult(
                step_name=step.name,
                status=StepStatus.FAILED,
                started_at=started_at,
                completed_at=datetime.now(timezone.utc),
                error=f"Unexpected: {exc}",
                metadata={"traceback": traceback.format_exc()},
            )
