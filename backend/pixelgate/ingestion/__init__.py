"""Ingestion — where pull-request data comes from."""

from pixelgate.ingestion.pull_request_source import (
    EventPullRequestSource,
    PullRequestEvent,
    PullRequestSource,
)

__all__ = ["PullRequestSource", "PullRequestEvent", "EventPullRequestSource"]
