"""Static storage-cost model for a task collection - no I/O dependencies."""

from dataclasses import dataclass

from .tasks import Task

# Task fields by storage kind: id, start_min, end_min / name, start, end, priority
NUMERIC_FIELDS = 3
TEXT_FIELDS = 4


@dataclass(frozen=True)
class FootprintModel:
    """Per-record byte costs used by the estimator."""

    object_overhead: int = 64
    bytes_per_number: int = 8
    bytes_per_string: int = 30  # average, header + chars
    collection_overhead: int = 32
    pointer_size: int = 8

    @property
    def bytes_per_task(self) -> int:
        return (
            self.object_overhead
            + NUMERIC_FIELDS * self.bytes_per_number
            + TEXT_FIELDS * self.bytes_per_string
        )


DEFAULT_MODEL = FootprintModel()


@dataclass(frozen=True)
class MemoryEstimate:
    """Estimated storage cost of a task collection."""

    task_count: int
    bytes_per_task: int
    total_bytes: int
    total_kb: str


def estimate_memory(tasks: list[Task], model: FootprintModel = DEFAULT_MODEL) -> MemoryEstimate:
    """
    Estimate the bytes needed to hold a list of tasks.

    Closed-form heuristic, not a measurement: every task costs the same
    fixed amount, and the list adds a header plus one pointer per task.
    Pure function - no I/O.
    """
    count = len(tasks)
    per_task = model.bytes_per_task
    collection = model.collection_overhead + count * model.pointer_size
    total = count * per_task + collection
    return MemoryEstimate(
        task_count=count,
        bytes_per_task=per_task,
        total_bytes=total,
        total_kb=f"{total / 1024:.2f}",
    )
