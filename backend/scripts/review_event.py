#!/usr/bin/env python3
"""
Review a pull request captured as a JSON event document.

Runs the full review pipeline locally and prints what the contributor
would see in the pull request.

Usage:
    cd backend
    python -m scripts.review_event path/to/event.json [--log-level DEBUG]

Exit codes:
    0  contribution accepted
    1  contribution rejected / needs manual review
    2  the review itself failed
"""

import argparse
import asyncio
import sys

from pixelgate.core.config import settings
from pixelgate.core.constants import ReviewStatus
from pixelgate.core.logging import get_logger, setup_logging
from pixelgate.ingestion.pull_request_source import EventPullRequestSource
from pixelgate.pipeline.engine import ReviewEngine
from pixelgate.pipeline.errors import CollaboratorError
from pixelgate.reporting.reporter import CollectingReporter

logger = get_logger("scripts.review_event")


def _parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Review a pixel contribution event")
    parser.add_argument("event", help="Path to the pull request event JSON file")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Log level (default: %(default)s)")
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON log lines")
    return parser.parse_args(argv)


async def review(event_path: str) -> int:
    """Run the review and print the report.  Returns the exit code."""
    try:
        source = EventPullRequestSource.from_file(event_path)
    except CollaboratorError as exc:
        logger.error("Cannot load event", path=event_path, error=str(exc))
        return 2

    reporter = CollectingReporter()
    result = await ReviewEngine().run(source, reporter)

    print(reporter.render() or "(nothing reported)")
    print(f"\n{'─' * 50}")
    print(f"  Run ID  : {result.run_id}")
    print(f"  Status  : {result.status}")
    print(f"  Passed  : {result.passed}")
    print(f"  Duration: {result.total_duration_ms}ms")
    if result.error:
        print(f"  Error   : {result.error}")
    print(f"{'─' * 50}")

    if result.status == ReviewStatus.FAILED:
        return 2
    return 0 if result.passed else 1


def main(argv=None) -> int:
    args = _parse_args(argv)
    setup_logging(args.log_level, json_logs=args.json_logs)
    return asyncio.run(review(args.event))


if __name__ == "__main__":
    sys.exit(main())
