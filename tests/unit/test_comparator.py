"""Unit tests for oas_consolidate.compare — SchemaComparator and equal_schemas."""
from __future__ import annotations

from oas_consolidate.compare import SchemaComparator, equal_schemas

_PET = {
    "title": "Pet",
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "tags": {"type": "array", "items": {"type": "string"}},
    },
    "required": ["name"],
}


class TestEqualSchemas:
    def test_identical_bodies(self) -> None:
        assert equal_schemas(_PET, dict(_PET))

    def test_key_order_is_irrelevant(self) -> None:
        reordered = {
            "required": ["name"],
            "properties": {
                "tags": {"items": {"type": "string"}, "type": "array"},
                "name": {"type": "string"},
            },
            "type": "object",
            "title": "Pet",
        }
        assert equal_schemas(_PET, reordered)

    def test_sequence_order_is_significant(self) -> None:
        a = {"title": "T", "required": ["a", "b"], "properties": {}}
        b = {"title": "T", "required": ["b", "a"], "properties": {}}
        assert not equal_schemas(a, b)

    def test_top_level_description_ignored(self) -> None:
        a = {**_PET, "description": "A pet"}
        b = {**_PET, "description": "Another pet"}
        assert equal_schemas(a, b)

    def test_description_present_on_one_side_only(self) -> None:
        assert equal_schemas({**_PET, "description": "A pet"}, _PET)

    def test_nested_description_ignored(self) -> None:
        a = {"title": "T", "properties": {"name": {"type": "string", "description": "x"}}}
        b = {"title": "T", "properties": {"name": {"type": "string", "description": "y"}}}
        assert equal_schemas(a, b)

    def test_items_description_ignored(self) -> None:
        a = {"type": "array", "items": {"type": "string", "description": "x"}}
        b = {"type": "array", "items": {"type": "string"}}
        assert equal_schemas(a, b)

    def test_property_named_description_is_not_ignored(self) -> None:
        a = {"title": "T", "properties": {"description": {"type": "string"}}}
        b = {"title": "T", "properties": {}}
        assert not equal_schemas(a, b)

    def test_different_property_names(self) -> None:
        a = {"title": "T", "properties": {"test": {"type": "string"}}}
        b = {"title": "T", "properties": {"testDiff": {"type": "string"}}}
        assert not equal_schemas(a, b)

    def test_different_title(self) -> None:
        assert not equal_schemas({**_PET, "title": "Dog"}, _PET)

    def test_scalar_versus_mapping(self) -> None:
        a = {"title": "T", "properties": {"a": {"type": "string"}}}
        b = {"title": "T", "properties": {"a": "string"}}
        assert not equal_schemas(a, b)

    def test_bool_versus_number(self) -> None:
        assert not equal_schemas({"minimum": 1}, {"minimum": True})

    def test_int_and_float_compare_numerically(self) -> None:
        assert equal_schemas({"minimum": 1}, {"minimum": 1.0})

    def test_enum_values_compared_literally(self) -> None:
        a = {"enum": [{"description": "x"}]}
        b = {"enum": [{"description": "y"}]}
        assert not equal_schemas(a, b)

    def test_custom_ignore_keys(self) -> None:
        a = {"title": "T", "example": {"name": "a"}, "properties": {}}
        b = {"title": "T", "example": {"name": "b"}, "properties": {}}
        assert not equal_schemas(a, b)
        assert equal_schemas(a, b, ignore_keys=("example",))

    def test_empty_ignore_keys_compares_description(self) -> None:
        a = {"title": "T", "description": "x"}
        b = {"title": "T", "description": "y"}
        assert not equal_schemas(a, b, ignore_keys=())


class TestSchemaComparator:
    def test_ignore_keys_property(self) -> None:
        assert SchemaComparator().ignore_keys == frozenset({"description"})

    def test_differences_empty_when_equal(self) -> None:
        assert SchemaComparator().differences(_PET, dict(_PET)) == []

    def test_differences_report_missing_keys(self) -> None:
        a = {"title": "T", "properties": {"test": {"type": "string"}}}
        b = {"title": "T", "properties": {"testDiff": {"type": "string"}}}
        assert SchemaComparator().differences(a, b) == [
            "/properties/test",
            "/properties/testDiff",
        ]

    def test_differences_report_value_mismatch(self) -> None:
        a = {"properties": {"a": {"type": "string"}}}
        b = {"properties": {"a": {"type": "integer"}}}
        assert SchemaComparator().differences(a, b) == ["/properties/a/type"]

    def test_differences_report_list_length(self) -> None:
        assert SchemaComparator().differences({"required": ["a"]}, {"required": []}) == [
            "/required"
        ]

    def test_differences_at_root_on_type_mismatch(self) -> None:
        assert SchemaComparator().differences({}, []) == [""]

    def test_repr_lists_ignore_keys(self) -> None:
        assert "description" in repr(SchemaComparator())
