"""Catalog repositories package."""

from .callable_record_source import CallableRecordSource
from .in_memory_record_source import InMemoryRecordSource
from .protocols import RecordSource
from .stub_sources import author_source, book_source

__all__ = [
    # Implementations
    "InMemoryRecordSource",
    "CallableRecordSource",
    # Protocol (from protocols/)
    "RecordSource",
    # Demo sources
    "author_source",
    "book_source",
]
