"""Task source interface."""

from typing import Protocol

from tasksweep.core.tasks import Task


class TaskSource(Protocol):
    """Interface for loading a task set from any backend."""

    @property
    def label(self) -> str:
        """Human-readable name of where the tasks come from."""
        ...

    def fetch_all(self) -> list[Task]:
        """Fetch all tasks."""
        ...
