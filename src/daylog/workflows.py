"""Shared workflow layer between the CLI and the parsing core.

Each collect_* function reads every document from a source, runs the
parser on it, and returns per-file groups.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from .adapters.file_documents import FileDocumentSource
from .config import Config
from .core.parser import parse_tasks, parse_tasks_all_dates
from .core.report import FileTaskGroup, group_by_file
from .ports.document_source import DocumentSource

logger = logging.getLogger(__name__)


def get_source(
    config: Config,
    notes_dir: str | None = None,
    extra_paths: Iterable[Path | str] = (),
) -> FileDocumentSource:
    """Resolve the document source from config, with an optional directory override."""
    root = notes_dir or config.notes_dir or "."
    return FileDocumentSource(
        Path(root).expanduser(),
        pattern=config.include_glob,
        exclude_dirs=config.exclude_dirs,
        extra_paths=extra_paths,
    )


def collect_tasks(source: DocumentSource, target_date: str) -> list[FileTaskGroup]:
    """Tasks logged on `target_date`, grouped by document."""
    results = []
    for path in source.list_documents():
        records = parse_tasks(source.read_lines(path), target_date)
        logger.debug(f"{path}: {len(records)} entries for {target_date}")
        results.append((path, records))
    return group_by_file(results)


def collect_history(source: DocumentSource, include_unlogged: bool = False) -> list[FileTaskGroup]:
    """Every logged task on any date, grouped by document."""
    results = []
    for path in source.list_documents():
        records = parse_tasks_all_dates(source.read_lines(path), include_unlogged=include_unlogged)
        logger.debug(f"{path}: {len(records)} entries")
        results.append((path, records))
    return group_by_file(results)
