"""Error representation and message formatting for field validation.

This module provides:
1. Error variants - ValidationError (a value broke a rule) and
   RuleSyntaxError (a rule expression was malformed)
2. Message formatting - one deterministic sentence per rule kind
3. Field binding - attach field identifiers as nested validation unwinds

Note: Deciding whether a value is valid belongs to the rule engine. Errors
here are data returned to the caller, not exceptions.
"""

from fieldvalidate.validation.binding import bind_field
from fieldvalidate.validation.errors import RuleSyntaxError, ValidationError
from fieldvalidate.validation.messages import (
    COMPARISON_PHRASES,
    format_syntax_message,
    format_validation_message,
)
from fieldvalidate.validation.paths import index_field, join_field, prefix_field
from fieldvalidate.validation.protocols import FieldError

__all__ = [
    "COMPARISON_PHRASES",
    "FieldError",
    "RuleSyntaxError",
    "ValidationError",
    "bind_field",
    "format_syntax_message",
    "format_validation_message",
    "index_field",
    "join_field",
    "prefix_field",
]
