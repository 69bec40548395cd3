"""File-based document source adapter."""

import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


class FileDocumentSource:
    """
    Markdown files on disk.

    Implements DocumentSource protocol. Files are found by globbing under
    `root`; `extra_paths` are added on top (e.g. files named on the command
    line). The combined list is deduplicated by resolved path.
    """

    def __init__(
        self,
        root: Path | str,
        pattern: str = "**/*.md",
        exclude_dirs: Iterable[str] = ("node_modules",),
        extra_paths: Iterable[Path | str] = (),
    ):
        self.root = Path(root).expanduser()
        self.pattern = pattern
        self.exclude_dirs = frozenset(exclude_dirs)
        self.extra_paths = [Path(p).expanduser() for p in extra_paths]

    def _is_excluded(self, path: Path) -> bool:
        try:
            parts = path.relative_to(self.root).parts[:-1]
        except ValueError:
            parts = path.parts[:-1]
        return any(part in self.exclude_dirs for part in parts)

    def _discover(self) -> list[Path]:
        if not self.root.is_dir():
            logger.warning(f"Notes directory not found: {self.root}")
            return []
        return sorted(
            p for p in self.root.glob(self.pattern) if p.is_file() and not self._is_excluded(p)
        )

    def list_documents(self) -> list[Path]:
        """List documents to scan, without duplicates."""
        seen: set[Path] = set()
        documents = []
        for path in [*self._discover(), *self.extra_paths]:
            key = path.resolve()
            if key in seen:
                continue
            seen.add(key)
            documents.append(path)
        return documents

    def read_lines(self, path: Path) -> list[str]:
        """
        Read a document as lines without line terminators.

        A trailing newline yields a final empty line, so indices line up
        with editor line numbers. A leading byte-order mark is dropped.
        Unreadable files yield no lines.
        """
        try:
            text = Path(path).read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Skipping unreadable document {path}: {e}")
            return []
        return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
