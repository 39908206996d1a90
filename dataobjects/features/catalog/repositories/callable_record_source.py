"""RecordSource adapter around a plain fetch function."""

from collections.abc import Callable, Mapping
from typing import Any, override

from dataobjects.features.mapping.errors import RecordNotFound, SourceUnavailable

from .protocols import RecordSource

FetchFunction = Callable[[object], Mapping[str, Any] | None]  # pyright: ignore[reportExplicitAny]


class CallableRecordSource(RecordSource):
    """Wraps any ``fetch(record_id)`` callable as a record source.

    Failures of the callable are translated into the mapping layer's errors:
    ``LookupError`` and a ``None`` result become ``RecordNotFound``,
    ``OSError`` (connection refused, timeouts, ...) becomes
    ``SourceUnavailable``. Nothing is retried.
    """

    def __init__(self, fetch: FetchFunction, name: str | None = None):
        self.fetch: FetchFunction = fetch
        self.name: str = name or getattr(fetch, "__name__", type(fetch).__name__)

    @override
    def fetch_by_id(self, record_id: object) -> Mapping[str, Any]:  # pyright: ignore[reportExplicitAny]
        try:
            record = self.fetch(record_id)
        except LookupError:
            raise RecordNotFound(self.name, record_id) from None
        except OSError as e:
            raise SourceUnavailable(self.name, str(e)) from e

        if record is None:
            raise RecordNotFound(self.name, record_id)
        return record
