"""Reporting — how review outcomes are handed back to the contributor."""

from pixelgate.reporting.reporter import CollectingReporter, ReportEntry, Reporter

__all__ = ["Reporter", "CollectingReporter", "ReportEntry"]
