"""Unit tests for records.py.

These tests verify which raw record shapes are accepted and how they are
flattened before field resolution.
"""

from collections import OrderedDict
from types import SimpleNamespace

import pytest
from pydantic import BaseModel

from dataobjects.features.mapping.errors import UnsupportedRecordShape
from dataobjects.features.mapping.records import normalize_record


class AuthorRow(BaseModel):
    id: int
    first_name: str


class TestNormalizeRecord:
    """Tests for normalize_record."""

    def test_plain_dict_is_copied(self) -> None:
        """Should return an equal dict that is not the caller's object."""
        data = {"id": 1, "title": "Boat"}

        record = normalize_record(data)

        assert record == data
        assert record is not data

    def test_ordered_mapping_keeps_order(self) -> None:
        """Should keep the key order of an ordered mapping."""
        record = normalize_record(OrderedDict([("b", 2), ("a", 1)]))

        assert list(record) == ["b", "a"]

    def test_attribute_record(self) -> None:
        """Should read attribute objects such as SimpleNamespace."""
        record = normalize_record(SimpleNamespace(id=101, first_name="Jerome"))

        assert record == {"id": 101, "first_name": "Jerome"}

    def test_pydantic_model(self) -> None:
        """Should dump pydantic models."""
        record = normalize_record(AuthorRow(id=101, first_name="Jerome"))

        assert record == {"id": 101, "first_name": "Jerome"}

    def test_list_of_pairs(self) -> None:
        """Should accept a sequence of (key, value) pairs."""
        record = normalize_record([("id", 1), ("title", "Boat")])

        assert record == {"id": 1, "title": "Boat"}

    def test_pair_iterator(self) -> None:
        """Should accept a one-shot iterator of pairs."""
        record = normalize_record(iter([("id", 1)]))

        assert record == {"id": 1}

    @pytest.mark.parametrize("data", ["id=1", b"id", 42, 3.5, None])
    def test_scalars_are_rejected(self, data: object) -> None:
        """Should reject strings, bytes and scalars."""
        with pytest.raises(UnsupportedRecordShape):
            _ = normalize_record(data)

    def test_malformed_pairs_are_rejected(self) -> None:
        """Should reject sequences whose items are not pairs."""
        with pytest.raises(UnsupportedRecordShape) as exc_info:
            _ = normalize_record([("id", 1), ("title",)])

        assert exc_info.value.data_type == "list"

    def test_callables_are_rejected(self) -> None:
        """Should not read a function's attribute dict as a record."""
        with pytest.raises(UnsupportedRecordShape):
            _ = normalize_record(lambda: None)
