"""Attach field identifiers to errors as nested validation unwinds."""

import logging

from fieldvalidate.validation.errors import RuleSyntaxError, ValidationError
from fieldvalidate.validation.protocols import FieldError

logger = logging.getLogger(__name__)


def bind_field(error: FieldError, field: str) -> FieldError:
    """Return an equivalent error carrying the given field identifier.

    Known variants are copied with the new identifier; the input instance is
    never modified. A later bind replaces the identifier from an earlier one.
    Errors of any other type are returned unchanged.

    Args:
        error: Error produced by a rule engine or a nested validation
        field: Field identifier to attach (e.g. "User.Age")

    Returns:
        New error with the identifier set, or the input if its type does not
        support rebinding
    """
    if isinstance(error, ValidationError):
        return error.with_field(field)
    if isinstance(error, RuleSyntaxError):
        return error.with_field(field)

    logger.debug(f"Field {field!r} not bound to unsupported error type {type(error).__name__}")
    return error
