"""Rule kinds and value classification."""

from fieldvalidate.models.enums import ValidatorKind, ValueShape, classify_value, type_name

__all__ = [
    "ValidatorKind",
    "ValueShape",
    "classify_value",
    "type_name",
]
