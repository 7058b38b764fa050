"""Change-set gate: which pull requests may be validated automatically."""

from pixelgate.changeset.classifier import ChangeSetClassifier
from pixelgate.changeset.schema import ChangeSet

__all__ = ["ChangeSet", "ChangeSetClassifier"]
