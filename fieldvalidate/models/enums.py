"""Enums describing validation rules and the shape of failing values.

ValidatorKind is the dispatch key for message wording. Rule engines may
report kinds this package does not know about; those travel as raw string
tags and are phrased by the generic fallback.
"""

from collections.abc import Mapping, Sequence, Set
from enum import Enum
from typing import Any


class ValidatorKind(Enum):
    """Kinds of validation rules a field can fail."""

    # Ordering and equality rules
    EQUAL = "eq"
    NOT_EQUAL = "ne"
    GREATER_OR_EQUAL = "gte"
    GREATER_THAN = "gt"
    LESS_THAN = "lt"
    LESS_OR_EQUAL = "lte"

    # Presence rules
    EMPTY = "empty"
    NIL = "nil"

    # Content rules
    FORMAT = "format"
    ONE_OF = "one_of"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_tag(cls, tag: "ValidatorKind | str") -> "ValidatorKind | str":
        """Resolve a rule tag to a known kind.

        Args:
            tag: Kind member or raw tag text (e.g. "gte")

        Returns:
            The matching member, or the tag unchanged if no member matches
        """
        if isinstance(tag, cls):
            return tag
        try:
            return cls(tag)
        except ValueError:
            return tag


class ValueShape(Enum):
    """How a failing value is measured by ordering rules."""

    SCALAR = "scalar"
    STRING = "string"
    CONTAINER = "container"


def classify_value(value: Any) -> ValueShape:
    """Classify a value as a scalar, a string, or a length-bearing container.

    Strings and bytes are checked first since they are also sequences.
    """
    if isinstance(value, (str, bytes, bytearray)):
        return ValueShape.STRING
    if isinstance(value, (Mapping, Sequence, Set)):
        return ValueShape.CONTAINER
    return ValueShape.SCALAR


def type_name(value: Any) -> str:
    """Return the type name of an observed value (e.g. "int", "NoneType")."""
    return type(value).__name__
