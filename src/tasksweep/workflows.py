"""Shared workflow layer between the CLI and the functional core.

Resolves where tasks come from, loads them, and assembles the report.
"""

import logging

from .adapters.json_file import JsonFileTaskSource
from .adapters.sample_tasks import SampleTaskSource
from .config import Config
from .core.report import ReportData, assemble_report
from .core.tasks import Task
from .ports.task_source import TaskSource

logger = logging.getLogger(__name__)


def get_task_source(config: Config, tasks_file: str | None = None) -> TaskSource:
    """Resolve the task source: explicit file, then configured file, then the sample set."""
    path = tasks_file or config.tasks_file
    if path:
        return JsonFileTaskSource(path)
    return SampleTaskSource()


def load_tasks(config: Config, tasks_file: str | None = None) -> list[Task]:
    """Fetch the task set from the resolved source."""
    source = get_task_source(config, tasks_file)
    tasks = source.fetch_all()
    logger.info(f"Loaded {len(tasks)} tasks from {source.label}")
    return tasks


def build_report(config: Config, tasks_file: str | None = None) -> ReportData:
    """Load tasks and compute every view over them."""
    tasks = load_tasks(config, tasks_file)
    data = assemble_report(tasks, config.footprint)
    logger.debug(
        f"Report: {len(data.sorted_tasks)} tasks, {len(data.overlaps)} overlaps, "
        f"{data.memory.total_bytes} bytes estimated"
    )
    return data
