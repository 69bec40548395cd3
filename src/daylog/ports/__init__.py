"""Ports - interfaces/protocols for external dependencies."""

from .document_source import DocumentSource

__all__ = [
    "DocumentSource",
]
