"""daylog CLI - daily task log extraction."""

import json
import logging
import sys
from pathlib import Path

import click

from .adapters.file_documents import FileDocumentSource
from .config import load_config
from .core.parser import parse_tasks, parse_tasks_all_dates
from .core.report import (
    format_groups,
    format_history,
    group_by_date,
    is_valid_date,
    local_date_string,
)
from .workflows import collect_history, collect_tasks, get_source

_files_argument = click.argument(
    "files",
    nargs=-1,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)


def _resolve_date(target_date: str | None) -> str:
    """Validated target date, defaulting to today."""
    if target_date is None:
        return local_date_string()
    if not is_valid_date(target_date):
        click.echo(f"Error: invalid date {target_date!r}, expected YYYY-MM-DD", err=True)
        sys.exit(1)
    return target_date


@click.group()
@click.version_option(package_name="daylog")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """daylog - list tasks by their dated log entries."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


@main.command()
@click.option("--date", "-d", "target_date", default=None,
              help="Date to list (YYYY-MM-DD), defaults to today")
@click.option("--dir", "notes_dir", default=None, help="Notes directory to scan")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@_files_argument
def today(target_date: str | None, notes_dir: str | None, as_json: bool, files: tuple[Path, ...]):
    """List tasks with a log entry for the day."""
    target = _resolve_date(target_date)
    config = load_config()
    source = get_source(config, notes_dir=notes_dir, extra_paths=files)
    groups = collect_tasks(source, target)

    if as_json:
        click.echo(json.dumps([g.to_dict() for g in groups], indent=2, ensure_ascii=False))
    else:
        click.echo(format_groups(groups, target))


@main.command()
@click.option("--dir", "notes_dir", default=None, help="Notes directory to scan")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--include-unlogged", is_flag=True, help="Also list tasks without any log entry")
@_files_argument
def history(notes_dir: str | None, as_json: bool, include_unlogged: bool, files: tuple[Path, ...]):
    """List every logged task, grouped by date."""
    config = load_config()
    source = get_source(config, notes_dir=notes_dir, extra_paths=files)
    groups = collect_history(source, include_unlogged=include_unlogged)
    buckets = group_by_date(entry for g in groups for entry in g.tasks)

    if as_json:
        click.echo(
            json.dumps(
                {day: [e.to_dict() for e in entries] for day, entries in buckets.items()},
                indent=2,
                ensure_ascii=False,
            )
        )
    else:
        click.echo(format_history(buckets))


@main.command()
@click.option("--date", "-d", "target_date", default=None,
              help="Only entries for this date (YYYY-MM-DD); all dates if omitted")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def parse(target_date: str | None, file: Path):
    """Dump raw parser records for one file as JSON."""
    lines = FileDocumentSource(file.parent).read_lines(file)

    if target_date is None:
        records = parse_tasks_all_dates(lines)
    else:
        records = parse_tasks(lines, _resolve_date(target_date))

    click.echo(json.dumps([r.to_dict() for r in records], indent=2, ensure_ascii=False))
