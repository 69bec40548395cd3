"""Document source interface."""

from pathlib import Path
from typing import Protocol


class DocumentSource(Protocol):
    """Interface for finding and reading outline documents."""

    def list_documents(self) -> list[Path]:
        """List documents to scan, without duplicates."""
        ...

    def read_lines(self, path: Path) -> list[str]:
        """Read a document as lines without line terminators."""
        ...
