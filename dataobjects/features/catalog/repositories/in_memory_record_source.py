"""In-memory implementation of the RecordSource protocol."""

from collections.abc import Iterable, Mapping
from typing import Any, override

from dataobjects.features.mapping.errors import RecordNotFound

from .protocols import RecordSource


class InMemoryRecordSource(RecordSource):
    """Record source backed by a dict of seeded records.

    Records are indexed by the string form of their id field, so ``101`` and
    ``"101"`` find the same record.
    """

    def __init__(
        self,
        records: Iterable[Mapping[str, Any]],  # pyright: ignore[reportExplicitAny]
        id_field: str = "id",
        name: str = "memory",
    ):
        """Initialize the source.

        Args:
            records: Raw records, each carrying ``id_field``.
            id_field: Storage name of the id field.
            name: Name used in error messages.
        """
        self.id_field: str = id_field
        self.name: str = name
        self._records: dict[str, dict[str, Any]] = {  # pyright: ignore[reportExplicitAny]
            str(record[id_field]): dict(record) for record in records
        }

    @override
    def fetch_by_id(self, record_id: object) -> Mapping[str, Any]:  # pyright: ignore[reportExplicitAny]
        try:
            return dict(self._records[str(record_id)])
        except KeyError:
            raise RecordNotFound(self.name, record_id) from None

    def __len__(self) -> int:
        return len(self._records)
