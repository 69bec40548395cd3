"""Functional core - pure business logic with no I/O."""

from .parser import (
    LogLine,
    ParsedTask,
    ParsedTaskWithDate,
    TaskLine,
    classify_line,
    parse_tasks,
    parse_tasks_all_dates,
)
from .report import (
    FileTaskGroup,
    TaskEntry,
    format_groups,
    format_history,
    format_task_line,
    group_by_date,
    group_by_file,
    is_valid_date,
    local_date_string,
)

__all__ = [
    # Parser
    "ParsedTask",
    "ParsedTaskWithDate",
    "TaskLine",
    "LogLine",
    "classify_line",
    "parse_tasks",
    "parse_tasks_all_dates",
    # Report
    "TaskEntry",
    "FileTaskGroup",
    "is_valid_date",
    "local_date_string",
    "group_by_file",
    "group_by_date",
    "format_task_line",
    "format_groups",
    "format_history",
]
