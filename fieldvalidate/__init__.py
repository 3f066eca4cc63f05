"""Field validation error reporting.

Typical use by a rule engine and its traversal:

    from fieldvalidate import ValidationError, ValidatorKind, bind_field

    error = ValidationError(observed_value=5, kind=ValidatorKind.GREATER_OR_EQUAL, constraint="18")
    error = bind_field(error, "Age")
    error.message  # "Age must be greater than or equal to 18"
"""

from fieldvalidate.models import ValidatorKind, ValueShape, classify_value
from fieldvalidate.validation import (
    FieldError,
    RuleSyntaxError,
    ValidationError,
    bind_field,
    index_field,
    join_field,
    prefix_field,
)

__all__ = [
    "FieldError",
    "RuleSyntaxError",
    "ValidationError",
    "ValidatorKind",
    "ValueShape",
    "bind_field",
    "classify_value",
    "index_field",
    "join_field",
    "prefix_field",
]
