"""Human-readable wording for validation and rule syntax failures.

Each rule kind maps to exactly one sentence. Ordering rules are phrased in
terms of length when the failing value is a string or a container.

When no field name has been bound yet, the field subject is dropped and the
sentence starts with its predicate (e.g. "is required"). Kinds this module
does not know about get a generic sentence naming the value type and the
validator tag, so formatting never fails.
"""

import logging
from collections.abc import Mapping, Set
from types import MappingProxyType
from typing import Any

from fieldvalidate.config import CONSTANTS
from fieldvalidate.models.enums import ValidatorKind, ValueShape, classify_value, type_name

logger = logging.getLogger(__name__)

COMPARISON_PHRASES = MappingProxyType(
    {
        ValidatorKind.EQUAL: "equal",
        ValidatorKind.NOT_EQUAL: "not equal",
        ValidatorKind.GREATER_OR_EQUAL: "greater than or equal",
        ValidatorKind.GREATER_THAN: "greater than",
        ValidatorKind.LESS_THAN: "less than",
        ValidatorKind.LESS_OR_EQUAL: "less than or equal",
    }
)

PRESENCE_KINDS = frozenset({ValidatorKind.EMPTY, ValidatorKind.NIL})

LENGTH_SHAPES = frozenset({ValueShape.STRING, ValueShape.CONTAINER})


def _with_subject(field: str, predicate: str) -> str:
    subject = field or CONSTANTS.UNBOUND_SUBJECT
    if not subject:
        return predicate
    return f"{subject} {predicate}"


def render_value(value: Any) -> str:
    """Render an observed value the way constraints are written.

    Sequences and sets become space-separated items in brackets ("[x y]"),
    mappings become "map[k:v]" with sorted keys. Sets are sorted by their
    rendered items so the output is deterministic.
    """
    if classify_value(value) is not ValueShape.CONTAINER:
        return str(value)
    if isinstance(value, Mapping):
        entries = sorted(f"{render_value(k)}:{render_value(v)}" for k, v in value.items())
        return f"map[{' '.join(entries)}]"
    items = [render_value(item) for item in value]
    if isinstance(value, Set):
        items.sort()
    return f"[{' '.join(items)}]"


def format_validation_message(
    field: str, observed_value: Any, kind: ValidatorKind | str, constraint: str
) -> str:
    """Render the message for a failed validation rule.

    Args:
        field: Field identifier ("" if not yet bound)
        observed_value: The value that failed the rule
        kind: Rule kind, or a raw tag for kinds unknown to this package
        constraint: Threshold, pattern or allowed set the rule compared against

    Returns:
        One sentence describing the failure
    """
    kind = ValidatorKind.from_tag(kind)

    if not field:
        logger.debug(f"Formatting unbound validation message for validator {kind}")

    if kind in COMPARISON_PHRASES:
        phrase = COMPARISON_PHRASES[kind]
        if classify_value(observed_value) in LENGTH_SHAPES:
            return _with_subject(field, f"length must be {phrase} to {constraint}")
        return _with_subject(field, f"must be {phrase} to {constraint}")

    if kind in PRESENCE_KINDS:
        if constraint == CONSTANTS.REQUIRED_MARKER:
            return _with_subject(field, "is required")
        return _with_subject(field, f"must be {kind}")

    if kind is ValidatorKind.FORMAT:
        return _with_subject(field, f"must be in {constraint} format")

    if kind is ValidatorKind.ONE_OF:
        return _with_subject(
            field,
            f"{render_value(observed_value)} is not an allowed value. Must be one of {constraint}",
        )

    if field:
        return (
            f'Validation error in field "{field}" of type "{type_name(observed_value)}" '
            f'using validator "{kind}"'
        )
    return f'Validation error in value of type "{type_name(observed_value)}" using validator "{kind}"'


def format_syntax_message(field: str, expression: str, near: str, comment: str) -> str:
    """Render the message for a rule expression that could not be parsed."""
    if field:
        return (
            f'Syntax error when validating field "{field}", '
            f'expression "{expression}" near "{near}": {comment}'
        )
    return f'Syntax error when validating value, expression "{expression}" near "{near}": {comment}'
