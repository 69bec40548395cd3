"""Adapters - I/O implementations of ports."""

from .file_documents import FileDocumentSource

__all__ = [
    "FileDocumentSource",
]
