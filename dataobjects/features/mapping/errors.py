"""Custom exceptions for the data object mapping layer."""

from typing import Any


class DataObjectError(Exception):
    """Base class for every error raised by the mapping layer."""


class MissingIdentityField(DataObjectError, KeyError):
    """Raised when a raw record does not carry the identity field."""

    def __init__(self, entity_type: str, field: str):
        self.entity_type: str = entity_type
        self.field: str = field
        super().__init__(f"Record for '{entity_type}' is missing identity field '{field}'")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class UnhashableIdentity(MissingIdentityField):
    """Raised when the identity value cannot be used as a cache key."""

    def __init__(self, entity_type: str, field: str, value: object):
        self.value_type: str = type(value).__name__
        super().__init__(entity_type, field)
        self.args = (
            f"Identity field '{field}' of '{entity_type}' holds an unhashable "
            f"{self.value_type}",
        )


class UnknownEntityType(DataObjectError, LookupError):
    """Raised when no data object class is registered under a type name."""

    def __init__(self, entity_type: str):
        self.entity_type: str = entity_type
        super().__init__(f"No data object registered for entity type '{entity_type}'")


class MissingFieldDeclaration(DataObjectError, TypeError):
    """Raised when a data object class declares no fields."""

    def __init__(self, class_name: str):
        self.class_name: str = class_name
        super().__init__(f"{class_name} does not declare any fields")


class UnsupportedRecordShape(DataObjectError, TypeError):
    """Raised when raw data is neither a mapping, an attribute record nor key/value pairs."""

    def __init__(self, data: Any):  # pyright: ignore[reportExplicitAny]
        self.data_type: str = type(data).__name__
        super().__init__(f"Unable to read record data of type '{self.data_type}'")


class UndeclaredRelation(DataObjectError, ValueError):
    """Raised when a related object has no entry in the relation map."""

    def __init__(self, class_name: str, related_type: str):
        self.class_name: str = class_name
        self.related_type: str = related_type
        super().__init__(f"{class_name} has no relation declared for '{related_type}'")


class UnsupportedFormat(DataObjectError, ValueError):
    """Raised when a data object is exported to an unknown record format."""

    def __init__(self, record_format: object):
        self.record_format: object = record_format
        super().__init__(f"Unsupported record format: {record_format!r}")


class IndexOutOfRange(DataObjectError, IndexError):
    """Raised when a field position is outside the declared fields."""

    def __init__(self, position: int, size: int):
        self.position: int = position
        self.size: int = size
        super().__init__(f"Field position {position} is outside 0..{size - 1}")


class RecordSourceError(DataObjectError):
    """Base class for failures reported by record sources."""


class SourceUnavailable(RecordSourceError):
    """Raised when a record source cannot be reached."""

    def __init__(self, source: str, reason: str | None = None):
        self.source: str = source
        self.reason: str | None = reason
        message = f"Record source '{source}' is unavailable"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class RecordNotFound(RecordSourceError, LookupError):
    """Raised when a record source has no record for the requested id."""

    def __init__(self, source: str, record_id: object):
        self.source: str = source
        self.record_id: object = record_id
        super().__init__(f"Record '{record_id}' not found in '{source}'")
