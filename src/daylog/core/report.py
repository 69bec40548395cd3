"""Pure report shaping - grouping and formatting parsed records, no I/O."""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path

from .parser import ParsedTask, ParsedTaskWithDate

DATE_FORMAT = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


@dataclass(frozen=True)
class TaskEntry:
    """A parsed record plus the document it came from."""

    path: Path
    task: ParsedTask | ParsedTaskWithDate

    @property
    def date(self) -> str | None:
        return getattr(self.task, "date", None)

    def to_dict(self) -> dict:
        return {**self.task.to_dict(), "file": str(self.path)}


@dataclass
class FileTaskGroup:
    """All entries found in one document."""

    file_name: str
    path: Path
    tasks: list[TaskEntry]

    def to_dict(self) -> dict:
        return {
            "fileName": self.file_name,
            "path": str(self.path),
            "tasks": [t.task.to_dict() for t in self.tasks],
        }


def is_valid_date(value: str) -> bool:
    """Check `value` is a real calendar date written as YYYY-MM-DD."""
    if not isinstance(value, str) or not DATE_FORMAT.match(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def local_date_string(as_of: datetime | None = None) -> str:
    """Today's local date as YYYY-MM-DD."""
    as_of = as_of or datetime.now()
    return as_of.strftime("%Y-%m-%d")


def group_by_file(
    results: Iterable[tuple[Path, list[ParsedTask] | list[ParsedTaskWithDate]]],
) -> list[FileTaskGroup]:
    """
    Build one group per document that has at least one record.

    Input order is kept.
    """
    groups = []
    for path, records in results:
        if not records:
            continue
        path = Path(path)
        groups.append(
            FileTaskGroup(
                file_name=path.name,
                path=path,
                tasks=[TaskEntry(path=path, task=r) for r in records],
            )
        )
    return groups


def group_by_date(entries: Iterable[TaskEntry]) -> dict[str, list[TaskEntry]]:
    """
    Bucket entries by log date, oldest first.

    Entries without a log (empty date) go last under the "" key.
    """
    buckets: dict[str, list[TaskEntry]] = {}
    for entry in entries:
        buckets.setdefault(entry.date or "", []).append(entry)

    # Empty string sorts first, so push it to the end explicitly
    ordered = sorted(k for k in buckets if k)
    if "" in buckets:
        ordered.append("")
    return {k: buckets[k] for k in ordered}


def format_task_line(entry: TaskEntry, show_file: bool = True) -> str:
    """
    Format a single entry for display.

    Line numbers are shown 1-based so `file:line` opens in an editor.
    """
    task = entry.task
    checkbox = "[x]" if task.is_completed else "[ ]"
    line = f"{checkbox} {task.text}"
    if show_file:
        line += f"  ({entry.path.name}:{task.line + 1})"
    if task.log:
        line += f"\n      {task.log}"
    return line


def format_groups(groups: list[FileTaskGroup], target_date: str) -> str:
    """Plain-text daily report, one section per document."""
    if not groups:
        return (
            f"No tasks logged for {target_date}.\n"
            f'Add a "- {target_date}: <note>" line indented under a task.'
        )

    sections = [f"Tasks for {target_date}"]
    for group in groups:
        lines = [f"## {group.file_name}"]
        for entry in group.tasks:
            lines.append(f"  {format_task_line(entry, show_file=False)}")
        sections.append("\n".join(lines))
    return "\n\n".join(sections)


def format_history(buckets: dict[str, list[TaskEntry]]) -> str:
    """Plain-text history report, one section per date."""
    if not buckets:
        return "No logged tasks found."

    sections = []
    for day, entries in buckets.items():
        header = f"### {day}" if day else "### (no log entries)"
        lines = [header] + [f"  {format_task_line(e)}" for e in entries]
        sections.append("\n".join(lines))
    return "\n\n".join(sections)
