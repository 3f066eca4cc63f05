"""Unit tests for field path composition."""

from fieldvalidate.models import ValidatorKind
from fieldvalidate.validation import (
    RuleSyntaxError,
    ValidationError,
    index_field,
    join_field,
    prefix_field,
)


def test_join_field():
    """Test dotted path joining."""
    assert join_field("User", "Age") == "User.Age"
    assert join_field("", "Age") == "Age"
    assert join_field("User", "") == "User"
    assert join_field("", "") == ""


def test_join_field_custom_separator(monkeypatch):
    """Test separator override via environment."""
    monkeypatch.setenv("FIELDVALIDATE_PATH_SEPARATOR", "/")

    assert join_field("User", "Age") == "User/Age"


def test_index_field():
    """Test bracketed paths for slice elements and map keys."""
    assert index_field("Tags", 2) == "Tags[2]"
    assert index_field("Labels", "env") == "Labels[env]"
    assert index_field("", 0) == "[0]"


def test_prefix_field_unbound_error():
    """Test that an unbound error takes the parent name."""
    error = ValidationError(observed_value="", kind=ValidatorKind.EMPTY, constraint="false")

    assert prefix_field(error, "Email").message == "Email is required"


def test_prefix_field_builds_nested_path():
    """Test stitching a path while unwinding nested validation."""
    leaf = ValidationError(observed_value=5, kind=ValidatorKind.GREATER_OR_EQUAL, constraint="18")

    error = prefix_field(leaf, "Age")
    error = prefix_field(error, index_field("", 0))
    error = prefix_field(error, "Users")
    error = prefix_field(error, "Org")

    assert error.field == "Org.Users[0].Age"
    assert error.message == "Org.Users[0].Age must be greater than or equal to 18"
    assert leaf.field == ""


def test_prefix_field_syntax_error():
    """Test prefixing a syntax error."""
    error = RuleSyntaxError(field="Min", expression="gte=", near="=", comment="missing value")

    assert prefix_field(error, "Limits").field == "Limits.Min"


def test_prefix_field_unknown_variant():
    """Test that unsupported error types are returned unchanged."""

    class Opaque:
        message = "opaque"

    error = Opaque()

    assert prefix_field(error, "Parent") is error
