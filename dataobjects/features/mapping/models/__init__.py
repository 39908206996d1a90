"""Data object models package.

This package contains the abstract data object base and the frozen
declarations (field maps, relation maps) concrete data objects are built from.
"""

from .data_object import (
    RecordFormat,
    RelatedObjects,
    StandardDataObject,
    get_data_object_class,
    registered_entity_types,
)
from .field_map import Cardinality, FieldMap, RelationMap, RelationSpec

__all__ = [
    # Base
    "StandardDataObject",
    "RecordFormat",
    "RelatedObjects",
    # Declarations
    "FieldMap",
    "RelationMap",
    "RelationSpec",
    "Cardinality",
    # Registry
    "get_data_object_class",
    "registered_entity_types",
]
