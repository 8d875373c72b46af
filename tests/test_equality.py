"""Tests for structural equality."""

from __future__ import annotations

from dataclasses import dataclass

from resume_studio.models import ContactInfo, Project, default_document
from resume_studio.utils import structurally_equal


@dataclass
class _Point:
    x: int
    y: int


class TestStructurallyEqual:
    def test_independently_built_documents_are_equal(self) -> None:
        left = default_document()
        right = default_document()

        assert left is not right
        assert structurally_equal(left, right)

    def test_field_difference_detected(self) -> None:
        left = ContactInfo(email="a@example.com")
        right = ContactInfo(email="b@example.com")

        assert not structurally_equal(left, right)

    def test_different_model_types_are_not_equal(self) -> None:
        assert not structurally_equal(Project(id="x"), ContactInfo())

    def test_mapping_key_order_matters(self) -> None:
        assert structurally_equal({"a": 1, "b": 2}, {"a": 1, "b": 2})
        assert not structurally_equal({"a": 1, "b": 2}, {"b": 2, "a": 1})

    def test_nested_sequences(self) -> None:
        assert structurally_equal([[1, 2], ["x"]], [[1, 2], ["x"]])
        assert not structurally_equal([[1, 2]], [[2, 1]])
        assert not structurally_equal([1, 2], [1, 2, 3])

    def test_list_and_tuple_compare_elementwise(self) -> None:
        assert structurally_equal([1, 2], (1, 2))

    def test_string_is_not_a_sequence_of_chars(self) -> None:
        assert not structurally_equal("ab", ["a", "b"])

    def test_dataclasses(self) -> None:
        assert structurally_equal(_Point(1, 2), _Point(1, 2))
        assert not structurally_equal(_Point(1, 2), _Point(2, 1))

    def test_mapping_against_non_mapping(self) -> None:
        assert not structurally_equal({}, [])
