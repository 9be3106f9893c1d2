"""Pure report assembly logic - no I/O dependencies."""

from dataclasses import dataclass
from typing import Any

from .footprint import DEFAULT_MODEL, FootprintModel, MemoryEstimate, estimate_memory
from .overlaps import OverlapPair, detect_overlaps
from .tasks import Priority, Task, group_by_priority, sort_by_start_time

BANNER_WIDTH = 60
TITLE = "TASK SCHEDULER - Algorithm Output"

SECTION_HEADINGS = {
    "sorted": "[ 1 ] sort_by_start_time()  ->  O(n log n)",
    "groups": "[ 2 ] group_by_priority()  ->  O(n)",
    "overlaps": "[ 3 ] detect_overlaps()   ->  O(n log n + k), O(n^2) worst",
    "memory": "[ 4 ] estimate_memory()   ->  O(1)",
}


@dataclass
class ReportData:
    """Every derived view of one task set, ready for formatting."""

    tasks: list[Task]
    sorted_tasks: list[Task]
    groups: dict[Priority, list[Task]]
    overlaps: list[OverlapPair]
    memory: MemoryEstimate


def assemble_report(tasks: list[Task], model: FootprintModel = DEFAULT_MODEL) -> ReportData:
    """
    Run all four views over the same task set.

    Pure function - no I/O.
    """
    return ReportData(
        tasks=tasks,
        sorted_tasks=sort_by_start_time(tasks),
        groups=group_by_priority(tasks),
        overlaps=detect_overlaps(tasks),
        memory=estimate_memory(tasks, model),
    )


def format_task_line(task: Task) -> str:
    """One task in start-time order, e.g. "  09:00-09:30  [High  ]  Morning Standup"."""
    return f"  {task.format_window()}  [{task.priority.value:<6}]  {task.name}"


def format_sorted_lines(tasks: list[Task]) -> list[str]:
    return [format_task_line(t) for t in tasks]


def format_group_lines(groups: dict[Priority, list[Task]]) -> list[str]:
    lines = []
    for priority, bucket in groups.items():
        lines.append(f"  {priority.value} ({len(bucket)} tasks):")
        for task in bucket:
            lines.append(f"    - {task.name} [{task.format_window()}]")
    return lines


def format_overlap_lines(overlaps: list[OverlapPair]) -> list[str]:
    if not overlaps:
        return ["  No overlapping tasks found."]

    lines = []
    for pair in overlaps:
        lines.append(f'  ! "{pair.task_a.name}" overlaps "{pair.task_b.name}"')
        lines.append(f"    Overlap window: {pair.format_window(sep=' - ')}")
    return lines


def format_memory_lines(memory: MemoryEstimate) -> list[str]:
    return [
        f"  Tasks        : {memory.task_count}",
        f"  Per task     : ~{memory.bytes_per_task} bytes",
        f"  Total heap   : ~{memory.total_bytes} bytes (~{memory.total_kb} KB)",
    ]


def format_section(key: str, lines: list[str]) -> str:
    """Heading, blank line, then the section body."""
    return "\n".join([SECTION_HEADINGS[key], "", *lines])


def format_report_sections(data: ReportData) -> dict[str, str]:
    """
    Format report data into labeled text sections.

    Returns dict with keys: sorted, groups, overlaps, memory
    """
    return {
        "sorted": format_section("sorted", format_sorted_lines(data.sorted_tasks)),
        "groups": format_section("groups", format_group_lines(data.groups)),
        "overlaps": format_section("overlaps", format_overlap_lines(data.overlaps)),
        "memory": format_section("memory", format_memory_lines(data.memory)),
    }


def format_report(data: ReportData) -> str:
    """Full report: banner, the four sections, closing rule."""
    rule = "=" * BANNER_WIDTH
    sections = format_report_sections(data)
    body = "\n\n".join(sections[key] for key in SECTION_HEADINGS)
    return f"{rule}\n {TITLE}\n{rule}\n\n{body}\n\n{rule}"


def overlap_to_dict(pair: OverlapPair) -> dict[str, Any]:
    return {
        "task_a": pair.task_a.id,
        "task_b": pair.task_b.id,
        "task_a_name": pair.task_a.name,
        "task_b_name": pair.task_b.name,
        "overlap_start": pair.overlap_start,
        "overlap_end": pair.overlap_end,
        "window": pair.format_window(),
    }


def memory_to_dict(memory: MemoryEstimate) -> dict[str, Any]:
    return {
        "task_count": memory.task_count,
        "bytes_per_task": memory.bytes_per_task,
        "total_bytes": memory.total_bytes,
        "total_kb": memory.total_kb,
    }


def report_to_dict(data: ReportData) -> dict[str, Any]:
    """JSON-serialisable view of the report."""
    return {
        "sorted": [t.to_dict() for t in data.sorted_tasks],
        "groups": {p.value: [t.id for t in bucket] for p, bucket in data.groups.items()},
        "overlaps": [overlap_to_dict(p) for p in data.overlaps],
        "memory": memory_to_dict(data.memory),
    }
