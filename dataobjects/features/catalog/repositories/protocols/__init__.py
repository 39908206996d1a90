"""Repository protocols for the catalog feature."""

from .record_source import RecordSource

__all__ = ["RecordSource"]
