from decimal import Decimal

import pytest

from openapi_schema_reader.errors import SchemaFormatError
from openapi_schema_reader.readers.json_util import (
    boolean_property,
    decimal_property,
    int_property,
    read_object_array,
    read_string_array,
    string_property,
)


@pytest.mark.parametrize(
    "value,expected",
    [
        (5, Decimal("5")),
        ("5.25", Decimal("5.25")),
        (" -3 ", Decimal("-3")),
        (Decimal("0.1"), Decimal("0.1")),
        (0.5, Decimal("0.5")),
    ],
)
def test_decimal_property(value, expected):
    assert decimal_property({"maximum": value}, "maximum") == expected


@pytest.mark.parametrize("value", ["abc", "", True, [1], {"a": 1}, "NaN", "Infinity"])
def test_decimal_property_rejects_malformed(value):
    with pytest.raises(SchemaFormatError):
        decimal_property({"maximum": value}, "maximum")


@pytest.mark.parametrize("value,expected", [(3, 3), ("3", 3), (Decimal("4.0"), 4), (0, 0)])
def test_int_property(value, expected):
    assert int_property({"minLength": value}, "minLength") == expected


@pytest.mark.parametrize("value", ["3.5", "three", Decimal("4.5"), False, [1], float("inf")])
def test_int_property_rejects_malformed(value):
    with pytest.raises(SchemaFormatError):
        int_property({"minLength": value}, "minLength")


@pytest.mark.parametrize("value,expected", [(True, True), (False, False), ("true", True), ("FALSE", False)])
def test_boolean_property(value, expected):
    assert boolean_property({"nullable": value}, "nullable") is expected


@pytest.mark.parametrize("value", ["yes", 1, 0, {"a": 1}])
def test_boolean_property_rejects_malformed(value):
    with pytest.raises(SchemaFormatError):
        boolean_property({"nullable": value}, "nullable")


def test_missing_properties_are_none():
    node = {}
    assert string_property(node, "title") is None
    assert decimal_property(node, "maximum") is None
    assert int_property(node, "minLength") is None
    assert boolean_property(node, "nullable") is None


def test_string_property_uses_text_form():
    assert string_property({"title": 12}, "title") == "12"
    assert string_property({"title": True}, "title") == "true"


def test_string_property_rejects_containers():
    with pytest.raises(SchemaFormatError):
        string_property({"title": {"a": 1}}, "title")


def test_arrays():
    assert read_string_array(["a", "b"]) == ["a", "b"]
    assert read_string_array("a") is None
    assert read_object_array([1, "a", None]) == [1, "a", None]
    assert read_object_array({"a": 1}) is None


def test_string_array_skips_nulls():
    assert read_string_array([None, "a", 1, True]) == ["a", "1", "true"]
    with pytest.raises(SchemaFormatError):
        read_string_array(["a", ["b"]])
