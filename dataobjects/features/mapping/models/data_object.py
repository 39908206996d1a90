"""Abstract base for data objects.

A data object wraps a raw record behind the field names its class exposes.
Records may be keyed by storage names or by exposed names; values end up
stored under the exposed name either way. Related data objects handed over
at construction time are injected according to the class's relation map.

Concrete classes register themselves under an entity type name, which is how
the factory finds them::

    class AuthorDataObject(StandardDataObject, entity_type="Author"):
        UNIQUE_ID = "id"
        fields = FieldMap.from_dict({"id": "id", "first_name": "firstName"})
"""

import enum
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, ClassVar

from ..errors import (
    IndexOutOfRange,
    MissingFieldDeclaration,
    UndeclaredRelation,
    UnknownEntityType,
    UnsupportedFormat,
)
from ..records import normalize_record
from .field_map import Cardinality, FieldMap, RelationMap

_registry: dict[str, type["StandardDataObject"]] = {}


class RelatedObjects(tuple["StandardDataObject", ...]):
    """Related data objects collected by a 'multiple' relation, in injection order."""


class RecordFormat(str, enum.Enum):
    """Shapes a data object can be exported to."""

    MAPPING = "mapping"
    ORDERED_PAIRS = "orderedPairs"


def get_data_object_class(entity_type: str) -> type["StandardDataObject"]:
    """Return the class registered under ``entity_type``.

    Raises:
        UnknownEntityType: If nothing is registered under that name.
    """
    try:
        return _registry[entity_type]
    except KeyError:
        raise UnknownEntityType(entity_type) from None


def registered_entity_types() -> dict[str, type["StandardDataObject"]]:
    """Snapshot of the entity type registry."""
    return dict(_registry)


class StandardDataObject:
    """Base class for all data objects.

    Subclasses declare ``fields`` (required), ``UNIQUE_ID`` and optionally
    ``relations``. Field values are never ``None``: a field is either set or
    absent.
    """

    UNIQUE_ID: ClassVar[str] = "id"

    fields: ClassVar[FieldMap] = FieldMap()

    relations: ClassVar[RelationMap | None] = None

    _entity_type: ClassVar[str | None] = None

    def __init_subclass__(cls, entity_type: str | None = None, **kwargs: Any) -> None:  # pyright: ignore[reportExplicitAny, reportAny]
        super().__init_subclass__(**kwargs)  # pyright: ignore[reportAny]
        cls._entity_type = entity_type
        if not isinstance(cls.fields, FieldMap):  # pyright: ignore[reportUnnecessaryIsInstance]
            raise TypeError(f"{cls.__name__}.fields must be a FieldMap")
        if cls.relations is not None and not isinstance(cls.relations, RelationMap):  # pyright: ignore[reportUnnecessaryIsInstance]
            raise TypeError(f"{cls.__name__}.relations must be a RelationMap")
        shadowed = [name for name in cls.fields.exposed_names() if hasattr(cls, name)]
        if shadowed:
            raise TypeError(
                f"{cls.__name__} exposes fields shadowed by class attributes: {shadowed}"
            )
        if entity_type is None:
            return

        registered = _registry.get(entity_type)
        if registered is not None and registered.__qualname__ != cls.__qualname__:
            raise ValueError(
                f"Entity type '{entity_type}' is already registered to {registered.__qualname__}"
            )
        _registry[entity_type] = cls

    def __init__(
        self,
        data: object,
        related: "Iterable[StandardDataObject] | StandardDataObject | None" = None,
    ):
        """Instantiate a new data object.

        Args:
            data: Raw record; a mapping, pydantic model, attribute object or
                iterable of ``(key, value)`` pairs.
            related: Related data objects to inject per ``relations``.

        Raises:
            MissingFieldDeclaration: If the class declares no fields.
            UnsupportedRecordShape: If ``data`` cannot be read as a record.
            UndeclaredRelation: If a related object has no relation entry.
        """
        if not self.fields:
            raise MissingFieldDeclaration(type(self).__name__)

        self._values: dict[str, Any] = {}  # pyright: ignore[reportExplicitAny]
        self._set_data(data)
        if related is not None:
            self._set_related_data(related)

    @classmethod
    def get_unique_id(cls) -> str:
        """Name of the field that identifies a record of this type."""
        return cls.UNIQUE_ID

    @classmethod
    def entity_type(cls) -> str:
        """Registered entity type name, or the class name without its suffix."""
        if cls._entity_type is not None:
            return cls._entity_type
        return cls.__name__.removesuffix("DataObject")

    def _set_data(self, data: object) -> None:
        # Storage name wins over exposed name when a record carries both
        record = normalize_record(data)
        for storage_name, exposed_name in self.fields.pairs:
            if record.get(storage_name) is not None:
                self._values[exposed_name] = record[storage_name]
            elif record.get(exposed_name) is not None:
                self._values[exposed_name] = record[exposed_name]

    def _set_related_data(
        self, related: "Iterable[StandardDataObject] | StandardDataObject"
    ) -> None:
        if isinstance(related, StandardDataObject):
            related = [related]

        for related_object in related:
            if not isinstance(related_object, StandardDataObject):  # pyright: ignore[reportUnnecessaryIsInstance]
                raise UndeclaredRelation(
                    type(self).__name__, type(related_object).__name__
                )

            related_type = related_object.entity_type()
            spec = self.relations.get(related_type) if self.relations else None
            if spec is None:
                raise UndeclaredRelation(type(self).__name__, related_type)

            if spec.cardinality is Cardinality.SINGLE:
                self._values[spec.key] = related_object
            else:
                current = self._values.get(spec.key)
                existing = current if isinstance(current, RelatedObjects) else ()
                self._values[spec.key] = RelatedObjects((*existing, related_object))

    @property
    def values(self) -> Mapping[str, Any]:  # pyright: ignore[reportExplicitAny]
        """Read-only view of the populated fields."""
        return MappingProxyType(self._values)

    def get_field(self, key: str) -> Any | None:  # pyright: ignore[reportExplicitAny]
        """Return the value of an exposed field, or None if it is not set."""
        return self._values.get(key)

    def has_field(self, key: str) -> bool:
        return key in self._values

    def list_field_names(self) -> list[str]:
        """Return the exposed field names in declaration order."""
        return self.fields.exposed_names()

    def field_at(self, position: int) -> Any | None:  # pyright: ignore[reportExplicitAny]
        """Return the value of the field declared at ``position``.

        Raises:
            IndexOutOfRange: If ``position`` is not a declared position.
        """
        return self._values.get(self._name_at(position))

    def is_set_at(self, position: int) -> bool:
        return self._name_at(position) in self._values

    def _name_at(self, position: int) -> str:
        names = self.fields.exposed_names()
        if not 0 <= position < len(names):
            raise IndexOutOfRange(position, len(names))
        return names[position]

    def export_fields(self, skip_gaps: bool = False) -> Iterator[tuple[str, Any]]:  # pyright: ignore[reportExplicitAny]
        """Yield ``(exposed_name, value)`` pairs in declaration order.

        By default iteration stops at the first unset field, so fields
        declared after a gap are not exported even when they are set. Pass
        ``skip_gaps=True`` to skip unset fields and carry on instead.
        """
        for name in self.fields.exposed_names():
            if name not in self._values:
                if skip_gaps:
                    continue
                return
            yield name, self._values[name]

    def __iter__(self) -> Iterator[tuple[str, Any]]:  # pyright: ignore[reportExplicitAny]
        return self.export_fields()

    def to_record(
        self, record_format: RecordFormat | str = RecordFormat.MAPPING
    ) -> dict[str, Any] | list[tuple[str, Any]]:  # pyright: ignore[reportExplicitAny]
        """Return the exported fields as a dict or as ordered pairs.

        Useful when the data has to be serialised, e.g.
        ``json.dumps(book.to_record())``. Related data objects are exported
        in the same format.

        Raises:
            UnsupportedFormat: If ``record_format`` is not a RecordFormat.
        """
        try:
            fmt = RecordFormat(record_format)
        except ValueError:
            raise UnsupportedFormat(record_format) from None

        pairs = [(name, _export_value(value, fmt)) for name, value in self.export_fields()]  # pyright: ignore[reportAny]
        if fmt is RecordFormat.MAPPING:
            return dict(pairs)
        return pairs

    def __getattr__(self, key: str) -> Any | None:  # pyright: ignore[reportExplicitAny]
        # Only reached when normal lookup fails; declared fields read as None when unset
        if not key.startswith("_") and key in self.fields.exposed_names():
            return self._values.get(key)
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{key}'")

    def __repr__(self) -> str:
        identity = self._values.get(self.get_unique_id())
        return f"<{type(self).__name__} {self.get_unique_id()}={identity!r} fields={list(self._values)}>"


def _export_value(value: Any, fmt: RecordFormat) -> Any:  # pyright: ignore[reportExplicitAny]
    if isinstance(value, StandardDataObject):
        return value.to_record(fmt)
    if isinstance(value, RelatedObjects):
        return [_export_value(item, fmt) for item in value]  # pyright: ignore[reportUnknownVariableType]
    return value
