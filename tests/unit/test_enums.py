"""Unit tests for rule kinds and value classification."""

from collections import OrderedDict

import pytest

from fieldvalidate.models import ValidatorKind, ValueShape, classify_value, type_name


def test_from_tag_known_kinds():
    """Test tag text resolves to members."""
    assert ValidatorKind.from_tag("eq") is ValidatorKind.EQUAL
    assert ValidatorKind.from_tag("one_of") is ValidatorKind.ONE_OF
    assert ValidatorKind.from_tag(ValidatorKind.NIL) is ValidatorKind.NIL


def test_from_tag_unknown_kind_passes_through():
    """Test unknown tags are returned unchanged."""
    assert ValidatorKind.from_tag("luhn") == "luhn"


def test_kind_text_form():
    """Test the textual form of a kind is its tag."""
    assert str(ValidatorKind.EMPTY) == "empty"
    assert f"{ValidatorKind.GREATER_OR_EQUAL}" == "gte"


@pytest.mark.parametrize(
    ("value", "shape"),
    [
        (5, ValueShape.SCALAR),
        (2.5, ValueShape.SCALAR),
        (None, ValueShape.SCALAR),
        (False, ValueShape.SCALAR),
        ("abc", ValueShape.STRING),
        (b"abc", ValueShape.STRING),
        ([], ValueShape.CONTAINER),
        ((1, 2), ValueShape.CONTAINER),
        ({"k": "v"}, ValueShape.CONTAINER),
        (OrderedDict(), ValueShape.CONTAINER),
        (frozenset(), ValueShape.CONTAINER),
        (object(), ValueShape.SCALAR),
    ],
)
def test_classify_value(value, shape):
    """Test value shapes used to pick length wording."""
    assert classify_value(value) is shape


def test_type_name():
    """Test observed type names."""
    assert type_name(3) == "int"
    assert type_name(None) == "NoneType"
    assert type_name(OrderedDict()) == "OrderedDict"
