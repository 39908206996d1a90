"""Unit tests for field_map.py."""

import pytest
from pydantic import ValidationError

from dataobjects.features.mapping.models import (
    Cardinality,
    FieldMap,
    RelationMap,
    RelationSpec,
)


class TestFieldMap:
    """Tests for FieldMap declarations."""

    def test_from_dict_keeps_declaration_order(self) -> None:
        """Should keep pairs in the order they were declared."""
        fields = FieldMap.from_dict({"id": "id", "first_name": "firstName", "email": "email"})

        assert fields.pairs == (("id", "id"), ("first_name", "firstName"), ("email", "email"))
        assert fields.exposed_names() == ["id", "firstName", "email"]
        assert fields.storage_names() == ["id", "first_name", "email"]
        assert len(fields) == 3

    def test_empty_field_map_is_falsy(self) -> None:
        """Should allow an empty declaration, which reads as no fields."""
        assert not FieldMap()

    def test_duplicate_exposed_names_are_rejected(self) -> None:
        """Should refuse two storage fields exposed under one name."""
        with pytest.raises(ValidationError):
            _ = FieldMap.from_pairs([("first_name", "name"), ("last_name", "name")])

    def test_empty_names_are_rejected(self) -> None:
        """Should refuse empty storage or exposed names."""
        with pytest.raises(ValidationError):
            _ = FieldMap.from_dict({"": "id"})

    def test_field_map_is_frozen(self) -> None:
        """Should not allow the declaration to be replaced."""
        fields = FieldMap.from_dict({"id": "id"})

        with pytest.raises(ValidationError):
            fields.pairs = (("x", "y"),)  # pyright: ignore[reportAttributeAccessIssue]


class TestRelationMap:
    """Tests for RelationMap declarations."""

    def test_from_dict_accepts_plain_specs(self) -> None:
        """Should validate plain dict specs into RelationSpec."""
        relations = RelationMap.from_dict(
            {"Author": {"key": "authorData", "cardinality": "multiple"}}
        )

        spec = relations.get("Author")
        assert spec == RelationSpec(key="authorData", cardinality=Cardinality.MULTIPLE)
        assert "Author" in relations
        assert len(relations) == 1

    def test_cardinality_defaults_to_single(self) -> None:
        assert RelationSpec(key="authorData").cardinality is Cardinality.SINGLE

    def test_unknown_type_returns_none(self) -> None:
        assert RelationMap().get("Publisher") is None

    def test_unknown_cardinality_is_rejected(self) -> None:
        """Should only accept 'single' and 'multiple'."""
        with pytest.raises(ValidationError):
            _ = RelationSpec.model_validate({"key": "tags", "cardinality": "many"})
