"""Pure overlap detection - no I/O dependencies."""

from dataclasses import dataclass

from .clock import format_minutes
from .tasks import Task, sort_by_start_time


@dataclass(frozen=True)
class OverlapPair:
    """Two tasks whose intervals intersect, and the shared window."""

    task_a: Task
    task_b: Task
    overlap_start: int
    overlap_end: int

    def duration_minutes(self) -> int:
        return self.overlap_end - self.overlap_start

    def format_window(self, sep: str = "-") -> str:
        return f"{format_minutes(self.overlap_start)}{sep}{format_minutes(self.overlap_end)}"


def intervals_overlap(s1: int, e1: int, s2: int, e2: int) -> bool:
    """Half-open test: [s1, e1) and [s2, e2) share at least one minute."""
    return s1 < e2 and s2 < e1


def detect_overlaps(tasks: list[Task]) -> list[OverlapPair]:
    """
    Find every pair of tasks whose intervals intersect.

    Sweeps the start-sorted tasks; the inner scan stops at the first task
    starting at or after the current task's end, since every later task
    starts even later. Pairs come back ordered by the first task's start,
    then the second's. Touching intervals (A.end == B.start) do not overlap.

    Pure function - no I/O.
    """
    if len(tasks) < 2:
        return []

    ordered = sort_by_start_time(tasks)
    pairs = []

    for i, a in enumerate(ordered):
        for b in ordered[i + 1 :]:
            if b.start_min >= a.end_min:
                break
            if intervals_overlap(a.start_min, a.end_min, b.start_min, b.end_min):
                pairs.append(
                    OverlapPair(
                        task_a=a,
                        task_b=b,
                        overlap_start=max(a.start_min, b.start_min),
                        overlap_end=min(a.end_min, b.end_min),
                    )
                )

    return pairs
