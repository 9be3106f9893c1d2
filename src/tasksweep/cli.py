"""tasksweep CLI - task ordering, grouping and overlap report."""

import json
import logging
import sys

import click

from .config import Config, load_config
from .core import report
from .core.errors import TaskSweepError
from .core.footprint import estimate_memory
from .core.overlaps import detect_overlaps
from .core.tasks import Task, group_by_priority, sort_by_start_time
from .workflows import build_report, load_tasks


def _setup_logging(config: Config, debug: bool) -> None:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else getattr(logging, config.log_level, logging.WARNING),
    )


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _echo_json(data) -> None:
    click.echo(json.dumps(data, indent=2))


def _load(ctx: click.Context) -> list[Task]:
    """Load tasks for a command, turning load failures into CLI errors."""
    try:
        return load_tasks(ctx.obj["config"], ctx.obj["tasks_file"])
    except (FileNotFoundError, TaskSweepError) as e:
        _fail(str(e))


@click.group(invoke_without_command=True)
@click.option("--file", "-f", "tasks_file", default=None, type=click.Path(dir_okay=False),
              help="JSON task file (defaults to TASKS_FILE in config, else the sample set)")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option(package_name="tasksweep")
@click.pass_context
def main(ctx, tasks_file: str | None, debug: bool):
    """tasksweep - sort, group and find overlaps in a day's tasks."""
    config = load_config()
    _setup_logging(config, debug)
    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["tasks_file"] = tasks_file

    if ctx.invoked_subcommand is None:
        ctx.invoke(report_cmd)


@main.command("report")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def report_cmd(ctx, as_json: bool = False):
    """Show the full four-section report."""
    try:
        data = build_report(ctx.obj["config"], ctx.obj["tasks_file"])
    except (FileNotFoundError, TaskSweepError) as e:
        _fail(str(e))

    if as_json:
        _echo_json(report.report_to_dict(data))
    else:
        click.echo(report.format_report(data))


@main.command("sort")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def sort_cmd(ctx, as_json: bool):
    """List tasks in start-time order."""
    ordered = sort_by_start_time(_load(ctx))

    if as_json:
        _echo_json([t.to_dict() for t in ordered])
    else:
        click.echo(report.format_section("sorted", report.format_sorted_lines(ordered)))


@main.command("groups")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def groups_cmd(ctx, as_json: bool):
    """List tasks grouped by priority."""
    tasks = _load(ctx)
    try:
        groups = group_by_priority(tasks)
    except TaskSweepError as e:
        _fail(str(e))

    if as_json:
        _echo_json({p.value: [t.to_dict() for t in bucket] for p, bucket in groups.items()})
    else:
        click.echo(report.format_section("groups", report.format_group_lines(groups)))


@main.command("overlaps")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def overlaps_cmd(ctx, as_json: bool):
    """List pairs of tasks whose times overlap."""
    pairs = detect_overlaps(_load(ctx))

    if as_json:
        _echo_json([report.overlap_to_dict(p) for p in pairs])
    else:
        click.echo(report.format_section("overlaps", report.format_overlap_lines(pairs)))


@main.command("memory")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def memory_cmd(ctx, as_json: bool):
    """Estimate the storage footprint of the task set."""
    memory = estimate_memory(_load(ctx), ctx.obj["config"].footprint)

    if as_json:
        _echo_json(report.memory_to_dict(memory))
    else:
        click.echo(report.format_section("memory", report.format_memory_lines(memory)))


if __name__ == "__main__":
    main()
