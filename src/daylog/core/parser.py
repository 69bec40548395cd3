"""Pure task/log parsing - no I/O dependencies.

A document is a sequence of lines. Checklist items ("task lines") look like

    - [ ] Buy milk
    - [x] Write report

and dated notes ("log lines") nested beneath them look like

      - 2024-01-01: went to store

A log line belongs to the most recent task line above it, provided it is
indented strictly deeper than that task.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass

TASK_PATTERN = re.compile(r"^(\s*)-\s*\[([ x])\]\s*(.*)")
LOG_PATTERN = re.compile(r"^(\s*)-\s*([0-9]{4}-[0-9]{2}-[0-9]{2}):\s*(.*)")


@dataclass(frozen=True)
class ParsedTask:
    """A task paired with one of its log entries for a single date."""

    is_completed: bool
    text: str
    line: int
    log: str

    def to_dict(self) -> dict:
        return {
            "isCompleted": self.is_completed,
            "text": self.text,
            "line": self.line,
            "log": self.log,
        }


@dataclass(frozen=True)
class ParsedTaskWithDate:
    """A task paired with one of its log entries, carrying the entry's date."""

    is_completed: bool
    text: str
    line: int
    log: str
    date: str

    def without_date(self) -> ParsedTask:
        return ParsedTask(
            is_completed=self.is_completed,
            text=self.text,
            line=self.line,
            log=self.log,
        )

    def to_dict(self) -> dict:
        return {**self.without_date().to_dict(), "date": self.date}


@dataclass(frozen=True)
class TaskLine:
    """A line declaring a checklist item."""

    indent: int
    completed: bool
    text: str


@dataclass(frozen=True)
class LogLine:
    """A line declaring a dated note."""

    indent: int
    date: str
    content: str


def classify_line(text: str) -> TaskLine | LogLine | None:
    """
    Classify a single line as a task line, a log line, or neither.

    The task pattern is tried first, so a line is never both.
    """
    match = TASK_PATTERN.match(text)
    if match:
        return TaskLine(
            indent=len(match.group(1)),
            completed=match.group(2) == "x",
            text=match.group(3),
        )

    match = LOG_PATTERN.match(text)
    if match:
        return LogLine(
            indent=len(match.group(1)),
            date=match.group(2),
            content=match.group(3),
        )

    return None


def _validate_lines(lines: Iterable[str]) -> list[str]:
    """Materialize the input, rejecting anything that is not a sequence of str."""
    if isinstance(lines, (str, bytes)):
        raise TypeError("lines must be a sequence of strings, not a single string")
    try:
        items = list(lines)
    except TypeError:
        raise TypeError(f"lines must be iterable, got {type(lines).__name__}") from None

    for i, item in enumerate(items):
        if not isinstance(item, str):
            raise TypeError(f"line {i} must be str, got {type(item).__name__}")
    return items


def _scan(lines: list[str]):
    """
    Yield (task_line_index, task, log) while walking the document.

    Every task line yields once with `log` set to None, as it becomes the
    current task. Every log line correctly nested under the current task
    yields with that task and the LogLine.
    """
    current: tuple[int, TaskLine] | None = None

    for i, text in enumerate(lines):
        kind = classify_line(text)
        if isinstance(kind, TaskLine):
            current = (i, kind)
            yield i, kind, None
            continue

        if isinstance(kind, LogLine) and current is not None:
            task_index, task = current
            if kind.indent > task.indent:
                yield task_index, task, kind


def parse_tasks(lines: Iterable[str], target_date: str) -> list[ParsedTask]:
    """
    Find tasks with a log entry dated exactly `target_date`.

    Each matching log line produces one record, so a task logged twice on
    the same day appears twice. Records come back in line order.

    Pure function - no I/O.
    """
    if not isinstance(target_date, str):
        raise TypeError(f"target_date must be str, got {type(target_date).__name__}")
    items = _validate_lines(lines)

    return [
        ParsedTask(
            is_completed=task.completed,
            text=task.text,
            line=task_index,
            log=log.content,
        )
        for task_index, task, log in _scan(items)
        if log is not None and log.date == target_date
    ]


def _unlogged(task_index: int, task: TaskLine) -> ParsedTaskWithDate:
    return ParsedTaskWithDate(
        is_completed=task.completed,
        text=task.text,
        line=task_index,
        log="",
        date="",
    )


def parse_tasks_all_dates(
    lines: Iterable[str],
    include_unlogged: bool = False,
) -> list[ParsedTaskWithDate]:
    """
    Find every correctly nested log entry, whatever its date.

    With include_unlogged, tasks that never received a log entry are also
    returned once, with empty `log` and `date`, at the position where the
    next task supersedes them (or at the end of the document).

    Pure function - no I/O.
    """
    items = _validate_lines(lines)
    results: list[ParsedTaskWithDate] = []

    # Current task, until it receives its first log entry
    pending: tuple[int, TaskLine] | None = None

    for task_index, task, log in _scan(items):
        if log is None:
            if include_unlogged and pending is not None:
                results.append(_unlogged(*pending))
            pending = (task_index, task)
            continue

        pending = None
        results.append(
            ParsedTaskWithDate(
                is_completed=task.completed,
                text=task.text,
                line=task_index,
                log=log.content,
                date=log.date,
            )
        )

    if include_unlogged and pending is not None:
        results.append(_unlogged(*pending))
    return results
