"""Protocol definition for record sources."""

from collections.abc import Mapping
from typing import Any, Protocol


class RecordSource(Protocol):
    """Protocol for a supplier of raw records.

    A record source is the only boundary to whatever store holds the data:
    an in-memory stub, a database or a remote service. Records are keyed by
    storage field names.
    """

    def fetch_by_id(self, record_id: object) -> Mapping[str, Any]:  # pyright: ignore[reportExplicitAny]
        """Fetch one raw record.

        Raises:
            RecordNotFound: If there is no record for ``record_id``.
            SourceUnavailable: If the backing store cannot be reached.
        """
        ...
