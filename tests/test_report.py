"""Tests for report assembly and formatting."""

import json

import pytest

from tasksweep.adapters.sample_tasks import SampleTaskSource
from tasksweep.core.footprint import FootprintModel
from tasksweep.core.report import (
    assemble_report,
    format_group_lines,
    format_memory_lines,
    format_overlap_lines,
    format_report,
    format_report_sections,
    format_task_line,
    report_to_dict,
)
from tasksweep.core.tasks import Priority, Task


@pytest.fixture
def sample_tasks():
    return SampleTaskSource().fetch_all()


@pytest.fixture
def data(sample_tasks):
    return assemble_report(sample_tasks)


class TestAssembleReport:
    def test_runs_every_view(self, data, sample_tasks):
        assert data.tasks is sample_tasks
        assert data.sorted_tasks[0].name == "Email Catchup"
        assert len(data.groups[Priority.HIGH]) == 4
        assert len(data.overlaps) == 6
        assert data.memory.task_count == 10

    def test_uses_given_model(self, sample_tasks):
        data = assemble_report(sample_tasks, FootprintModel(bytes_per_string=0))
        assert data.memory.bytes_per_task == 64 + 24


class TestFormatting:
    def test_task_line(self):
        task = Task(id=1, name="Morning Standup", start="09:00", end="09:30", priority="High")
        assert format_task_line(task) == "  09:00-09:30  [High  ]  Morning Standup"

    def test_group_lines(self, data):
        lines = format_group_lines(data.groups)
        assert lines[0] == "  High (4 tasks):"
        assert lines[1] == "    - Morning Standup [09:00-09:30]"
        assert "  Medium (3 tasks):" in lines
        assert "  Low (3 tasks):" in lines

    def test_group_lines_empty_bucket(self):
        task = Task(id=1, name="Solo", start="09:00", end="10:00", priority="Low")
        lines = format_group_lines({Priority.HIGH: [], Priority.MEDIUM: [], Priority.LOW: [task]})
        assert lines == [
            "  High (0 tasks):",
            "  Medium (0 tasks):",
            "  Low (1 tasks):",
            "    - Solo [09:00-10:00]",
        ]

    def test_overlap_lines(self, data):
        lines = format_overlap_lines(data.overlaps)
        assert lines[0] == '  ! "Morning Standup" overlaps "Code Review"'
        assert lines[1] == "    Overlap window: 09:15 - 09:30"
        assert len(lines) == 12

    def test_no_overlaps(self):
        assert format_overlap_lines([]) == ["  No overlapping tasks found."]

    def test_memory_lines(self, data):
        assert format_memory_lines(data.memory) == [
            "  Tasks        : 10",
            "  Per task     : ~208 bytes",
            "  Total heap   : ~2192 bytes (~2.14 KB)",
        ]

    def test_sections(self, data):
        sections = format_report_sections(data)
        assert list(sections) == ["sorted", "groups", "overlaps", "memory"]
        assert sections["sorted"].startswith("[ 1 ] sort_by_start_time()")
        assert "  08:30-09:00  [Low   ]  Email Catchup" in sections["sorted"]

    def test_overlap_heading_states_worst_case(self, data):
        heading = format_report_sections(data)["overlaps"].splitlines()[0]
        assert heading.startswith("[ 3 ] detect_overlaps()")
        assert "O(n^2) worst" in heading

    def test_full_report_order(self, data):
        text = format_report(data)
        positions = [text.index(f"[ {n} ]") for n in range(1, 5)]
        assert positions == sorted(positions)
        assert text.startswith("=" * 60)
        assert text.endswith("=" * 60)
        assert "TASK SCHEDULER" in text


class TestReportToDict:
    def test_json_serialisable(self, data):
        payload = json.loads(json.dumps(report_to_dict(data)))
        assert [t["id"] for t in payload["sorted"]][:3] == [10, 1, 2]
        assert payload["groups"]["Low"] == [5, 9, 10]
        assert payload["overlaps"][0]["window"] == "09:15-09:30"
        assert payload["memory"]["total_kb"] == "2.14"
