"""Functional core - pure business logic with no I/O."""

from .errors import (
    TaskSweepError,
    InvalidTimeError,
    InvalidTaskError,
    UnknownPriorityError,
    TaskSourceError,
)
from .clock import to_minutes, format_minutes
from .tasks import Task, Priority, sort_by_start_time, group_by_priority
from .overlaps import OverlapPair, detect_overlaps, intervals_overlap
from .footprint import FootprintModel, MemoryEstimate, estimate_memory
from .report import ReportData, assemble_report, format_report

__all__ = [
    # Errors
    "TaskSweepError",
    "InvalidTimeError",
    "InvalidTaskError",
    "UnknownPriorityError",
    "TaskSourceError",
    # Clock
    "to_minutes",
    "format_minutes",
    # Tasks
    "Task",
    "Priority",
    "sort_by_start_time",
    "group_by_priority",
    # Overlaps
    "OverlapPair",
    "detect_overlaps",
    "intervals_overlap",
    # Footprint
    "FootprintModel",
    "MemoryEstimate",
    "estimate_memory",
    # Report
    "ReportData",
    "assemble_report",
    "format_report",
]
