"""daylog - extract tasks from Markdown checklists by their dated log entries."""

from .core.parser import ParsedTask, ParsedTaskWithDate, parse_tasks, parse_tasks_all_dates

__all__ = [
    "ParsedTask",
    "ParsedTaskWithDate",
    "parse_tasks",
    "parse_tasks_all_dates",
]
