"""Field and relation declarations for data objects.

A data object class declares, once, how storage-side field names map onto
the names it exposes publicly, and which related data object types it accepts.
Both declarations are frozen pydantic models validated when the class is
defined.
"""

import enum
from collections.abc import Iterable, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Cardinality(enum.Enum):
    """How many related objects of one type a field holds."""

    SINGLE = "single"
    MULTIPLE = "multiple"


class FieldMap(BaseModel):
    """Ordered correspondence between storage and exposed field names.

    Order is significant: it fixes iteration and export order.
    """

    model_config = ConfigDict(frozen=True)  # pyright: ignore[reportUnannotatedClassAttribute]

    pairs: tuple[tuple[str, str], ...] = Field(
        default=(), description="(storage_name, exposed_name) pairs in declaration order"
    )

    @field_validator("pairs")
    @classmethod
    def validate_pairs(
        cls, v: tuple[tuple[str, str], ...]
    ) -> tuple[tuple[str, str], ...]:
        """Ensure names are non-empty and exposed names are unique."""
        seen: set[str] = set()
        for storage_name, exposed_name in v:
            if not storage_name or not exposed_name:
                raise ValueError("Field names cannot be empty")
            if exposed_name in seen:
                raise ValueError(f"Exposed field '{exposed_name}' is declared twice")
            seen.add(exposed_name)
        return v

    @classmethod
    def from_dict(cls, fields: Mapping[str, str]) -> "FieldMap":
        """Build a field map from ``{storage_name: exposed_name}``."""
        return cls(pairs=tuple(fields.items()))

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> "FieldMap":
        return cls(pairs=tuple(pairs))

    def exposed_names(self) -> list[str]:
        """Exposed names in declaration order."""
        return [exposed for _, exposed in self.pairs]

    def storage_names(self) -> list[str]:
        return [storage for storage, _ in self.pairs]

    def __len__(self) -> int:
        return len(self.pairs)


class RelationSpec(BaseModel):
    """Where a related object is injected and how many of it are kept."""

    model_config = ConfigDict(frozen=True)  # pyright: ignore[reportUnannotatedClassAttribute]

    key: str = Field(..., min_length=1, description="Exposed field receiving the object")
    cardinality: Cardinality = Field(
        default=Cardinality.SINGLE, description="'single' assigns, 'multiple' appends"
    )


class RelationMap(BaseModel):
    """Related entity type name to relation spec."""

    model_config = ConfigDict(frozen=True)  # pyright: ignore[reportUnannotatedClassAttribute]

    relations: dict[str, RelationSpec] = Field(default_factory=dict)

    @classmethod
    def from_dict(
        cls, relations: Mapping[str, RelationSpec | Mapping[str, str]]
    ) -> "RelationMap":
        """Build a relation map from ``{entity_type: spec}``.

        Specs may be given as ``RelationSpec`` or as plain dicts, e.g.
        ``{"Author": {"key": "authorData", "cardinality": "single"}}``.
        """
        return cls.model_validate({"relations": dict(relations)})

    def get(self, entity_type: str) -> RelationSpec | None:
        return self.relations.get(entity_type)

    def __contains__(self, entity_type: object) -> bool:
        return entity_type in self.relations

    def __len__(self) -> int:
        return len(self.relations)
