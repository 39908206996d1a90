"""Book data object."""

from typing import ClassVar

from dataobjects.features.mapping.models import (
    Cardinality,
    FieldMap,
    RelationMap,
    RelationSpec,
    StandardDataObject,
)


class BookDataObject(StandardDataObject, entity_type="Book"):
    """A book, with its author injected under ``authorData``."""

    UNIQUE_ID: ClassVar[str] = "id"

    fields: ClassVar[FieldMap] = FieldMap.from_dict(
        {
            "id": "id",
            "title": "title",
            "description": "description",
            "author": "author",
            "publisher": "publisher",
            "topic": "topic",
            "price": "price",
            "authorData": "authorData",
        }
    )

    relations: ClassVar[RelationMap | None] = RelationMap.from_dict(
        {"Author": RelationSpec(key="authorData", cardinality=Cardinality.SINGLE)}
    )
