"""Ports - interfaces/protocols for external dependencies."""

from .task_source import TaskSource

__all__ = [
    "TaskSource",
]
