"""Author data object."""

from typing import ClassVar

from dataobjects.features.mapping.models import FieldMap, StandardDataObject


class AuthorDataObject(StandardDataObject, entity_type="Author"):
    """An author as exposed to callers.

    Storage uses snake_case column names; callers see camelCase.
    """

    UNIQUE_ID: ClassVar[str] = "id"

    fields: ClassVar[FieldMap] = FieldMap.from_dict(
        {
            "id": "id",
            "first_name": "firstName",
            "last_name": "lastName",
            "email": "email",
        }
    )
