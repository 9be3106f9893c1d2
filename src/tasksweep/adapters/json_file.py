"""JSON file task source adapter."""

import json
import logging
from pathlib import Path

from tasksweep.core.errors import TaskSourceError, TaskSweepError
from tasksweep.core.tasks import Task

logger = logging.getLogger(__name__)


class JsonFileTaskSource:
    """
    Task records read from a JSON file.

    Implements TaskSource protocol. Accepts either a top-level array of
    records or an object with a "tasks" array. No business logic - just I/O.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    @property
    def label(self) -> str:
        return str(self.path)

    def _read_records(self) -> list:
        if not self.path.exists():
            raise FileNotFoundError(f"Task file not found: {self.path}")

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except UnicodeDecodeError as e:
            raise TaskSourceError(f"{self.path}: not UTF-8 text ({e.reason})") from e
        except json.JSONDecodeError as e:
            raise TaskSourceError(f"{self.path}: invalid JSON ({e})") from e

        if isinstance(data, dict):
            data = data.get("tasks")
        if not isinstance(data, list):
            raise TaskSourceError(f"{self.path}: expected a list of task records")
        return data

    def fetch_all(self) -> list[Task]:
        """Load and validate every record; the first bad record fails the whole file."""
        records = self._read_records()
        logger.debug(f"Read {len(records)} task records from {self.path}")

        tasks = []
        for index, record in enumerate(records):
            if not isinstance(record, dict):
                raise TaskSourceError(f"{self.path}: record {index} is not an object")
            try:
                tasks.append(Task.from_dict(record))
            except TaskSweepError as e:
                raise TaskSourceError(f"{self.path}: record {index}: {e}") from e

        ids = [t.id for t in tasks]
        if len(set(ids)) != len(ids):
            raise TaskSourceError(f"{self.path}: duplicate task ids")
        return tasks
