"""Pure task domain logic - no I/O dependencies."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .clock import format_minutes, to_minutes
from .errors import InvalidTaskError, UnknownPriorityError


class Priority(Enum):
    """Fixed task priority levels, highest first."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @classmethod
    def parse(cls, value: "Priority | str") -> "Priority":
        """Resolve a member or its display string (case-insensitive)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        raise UnknownPriorityError(f"Unrecognized priority: {value!r}")


@dataclass(frozen=True)
class Task:
    """A named, prioritised time interval within a single day."""

    id: int
    name: str
    start: str
    end: str
    priority: Priority
    start_min: int = field(init=False, compare=False)
    end_min: int = field(init=False, compare=False)

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise InvalidTaskError(f"Task {self.id} has an empty name")

        start_min = to_minutes(self.start)
        end_min = to_minutes(self.end)
        if start_min >= end_min:
            raise InvalidTaskError(
                f"Task {self.id} ({self.name}) ends at {self.end}, not after its start {self.start}"
            )

        # Frozen dataclass: derived fields have to bypass __setattr__
        object.__setattr__(self, "priority", Priority.parse(self.priority))
        object.__setattr__(self, "start_min", start_min)
        object.__setattr__(self, "end_min", end_min)

    def duration_minutes(self) -> int:
        return self.end_min - self.start_min

    def format_window(self) -> str:
        return f"{format_minutes(self.start_min)}-{format_minutes(self.end_min)}"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Task":
        """Create Task from a raw record mapping."""
        missing = [k for k in ("id", "name", "start", "end", "priority") if k not in data]
        if missing:
            raise InvalidTaskError(f"Task record missing fields: {', '.join(missing)}")
        raw_id = data["id"]
        if isinstance(raw_id, str) and raw_id.strip().isascii() and raw_id.strip().isdigit():
            raw_id = int(raw_id)
        # bool is an int subclass; true/false are not ids
        if not isinstance(raw_id, int) or isinstance(raw_id, bool):
            raise InvalidTaskError(f"Task id must be an integer, got {raw_id!r}")
        if not isinstance(data["name"], str):
            raise InvalidTaskError(f"Task {raw_id} name must be a string, got {data['name']!r}")
        return cls(
            id=raw_id,
            name=data["name"],
            start=data["start"],
            end=data["end"],
            priority=data["priority"],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "start": self.start,
            "end": self.end,
            "start_min": self.start_min,
            "end_min": self.end_min,
            "priority": self.priority.value,
        }


def sort_by_start_time(tasks: list[Task]) -> list[Task]:
    """
    Sort tasks by start time, ascending.

    Returns a new list; ties keep their input order.
    Pure function - no I/O.
    """
    return sorted(tasks, key=lambda t: t.start_min)


def group_by_priority(tasks: list[Task]) -> dict[Priority, list[Task]]:
    """
    Bucket tasks by priority in a single pass.

    Every priority level has a bucket, even when empty. Raises
    UnknownPriorityError for a task whose priority has no bucket.
    Pure function - no I/O.
    """
    groups: dict[Priority, list[Task]] = {p: [] for p in Priority}
    for task in tasks:
        bucket = groups.get(task.priority)
        if bucket is None:
            raise UnknownPriorityError(
                f"Task {task.id} has unrecognized priority {task.priority!r}"
            )
        bucket.append(task)
    return groups
