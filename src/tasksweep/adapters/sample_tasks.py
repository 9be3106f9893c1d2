"""Built-in sample task set."""

from tasksweep.core.tasks import Task

SAMPLE_RECORDS = (
    {"id": 1, "name": "Morning Standup", "start": "09:00", "end": "09:30", "priority": "High"},
    {"id": 2, "name": "Code Review", "start": "09:15", "end": "10:00", "priority": "High"},
    {"id": 3, "name": "Database Migration", "start": "10:30", "end": "12:00", "priority": "High"},
    {"id": 4, "name": "Sprint Planning", "start": "11:30", "end": "12:30", "priority": "Medium"},
    {"id": 5, "name": "Lunch Break", "start": "12:00", "end": "13:00", "priority": "Low"},
    {"id": 6, "name": "API Integration", "start": "13:00", "end": "15:00", "priority": "Medium"},
    {"id": 7, "name": "Write Unit Tests", "start": "14:00", "end": "16:00", "priority": "Medium"},
    {"id": 8, "name": "Deploy to Staging", "start": "15:30", "end": "16:30", "priority": "High"},
    {"id": 9, "name": "Documentation", "start": "16:00", "end": "17:00", "priority": "Low"},
    {"id": 10, "name": "Email Catchup", "start": "08:30", "end": "09:00", "priority": "Low"},
)


class SampleTaskSource:
    """
    The fixed ten-task demo day.

    Implements TaskSource protocol. Builds fresh Task objects on every call.
    """

    label = "sample"

    def fetch_all(self) -> list[Task]:
        return [Task.from_dict(record) for record in SAMPLE_RECORDS]
