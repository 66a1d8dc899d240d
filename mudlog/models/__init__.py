"""Data models for drilling-log measurements and their cleaning."""

from mudlog.models.core import Measurement, compare_depth, depth_key
from mudlog.models.working_set import CleaningReport, WorkingSet, WorkingSetSummary

__all__ = [
    "Measurement",
    "compare_depth",
    "depth_key",
    "WorkingSet",
    "CleaningReport",
    "WorkingSetSummary",
]
