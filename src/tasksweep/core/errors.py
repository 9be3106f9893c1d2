"""Exception hierarchy shared by the core and its adapters."""


class TaskSweepError(Exception):
    """Base class for all tasksweep errors."""


class InvalidTimeError(TaskSweepError, ValueError):
    """A wall-clock string or minute value is out of range or malformed."""


class InvalidTaskError(TaskSweepError, ValueError):
    """A task record is incomplete or describes an empty interval."""


class UnknownPriorityError(TaskSweepError, ValueError):
    """A priority value is not one of the known categories."""


class TaskSourceError(TaskSweepError):
    """A task source could not produce tasks."""
