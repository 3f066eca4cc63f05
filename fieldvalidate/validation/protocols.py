"""Validation protocol definitions."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class FieldError(Protocol):
    """Protocol for errors that can be attributed to a field.

    Implemented by ValidationError and RuleSyntaxError. Other implementations
    are accepted by the binder but left unchanged by it.
    """

    field: str

    @property
    def message(self) -> str:
        """Return a human-readable description of the failure."""
        ...
