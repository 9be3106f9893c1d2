"""tasksweep - ordering, grouping and overlap detection for time-boxed tasks."""

__version__ = "0.1.0"
