"""Raw record normalisation.

Data objects accept records in whatever shape a record source hands over:
a mapping, a pydantic model, a plain attribute object (``SimpleNamespace``
and the like) or an iterable of ``(key, value)`` pairs. Everything is
flattened to a plain ``dict`` before field resolution.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel

from .errors import UnsupportedRecordShape

RawRecord = dict[str, Any]  # pyright: ignore[reportExplicitAny]


def normalize_record(data: object) -> RawRecord:
    """Return ``data`` as a plain dict keyed by field name.

    Raises:
        UnsupportedRecordShape: If ``data`` cannot be read as a record.
    """
    if isinstance(data, Mapping):
        return dict(data)  # pyright: ignore[reportUnknownArgumentType]

    if isinstance(data, BaseModel):
        return data.model_dump()

    if isinstance(data, (str, bytes, bytearray)):
        raise UnsupportedRecordShape(data)

    if isinstance(data, Iterable):
        return _from_pairs(data)  # pyright: ignore[reportUnknownArgumentType]

    if hasattr(data, "__dict__") and not callable(data):
        return dict(vars(data))

    raise UnsupportedRecordShape(data)


def _from_pairs(data: Iterable[object]) -> RawRecord:
    record: RawRecord = {}
    for item in data:
        if not isinstance(item, (tuple, list)) or len(item) != 2:  # pyright: ignore[reportUnknownArgumentType]
            raise UnsupportedRecordShape(data)
        key, value = item  # pyright: ignore[reportUnknownVariableType]
        record[key] = value
    return record
