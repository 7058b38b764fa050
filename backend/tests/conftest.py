"""Shared fixtures for the pixelgate test suite."""

from __future__ import annotations

import pytest

from pixelgate.changeset.classifier import ChangeSetClassifier
from pixelgate.validation.pixel_validator import PatchValidator

UNCLAIMED = "<UNCLAIMED>"
DATASET_FILE = "_data/pixels.json"
SYNC_FORK_URL = "https://help.github.com/en/articles/syncing-a-fork"


@pytest.fixture
def validator() -> PatchValidator:
    return PatchValidator(unclaimed_username=UNCLAIMED, sync_fork_help_url=SYNC_FORK_URL)


@pytest.fixture
def classifier() -> ChangeSetClassifier:
    return ChangeSetClassifier(dataset_file=DATASET_FILE, git_help_url="https://dangitgit.com/")
