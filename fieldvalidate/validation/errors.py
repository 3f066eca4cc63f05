"""Validation error definitions.

Both error variants are immutable value objects. They are returned to the
caller as data, never raised. The field name starts out empty and is
attached later by the binder, which produces a new instance each time.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fieldvalidate.models.enums import ValidatorKind
from fieldvalidate.validation.messages import format_syntax_message, format_validation_message


class ValidationError(BaseModel):
    """A value that violated a validation rule.

    Attributes:
        field: Field identifier, empty until bound
        observed_value: The value that failed the rule
        kind: Rule kind (raw tag string for kinds unknown to this package)
        constraint: Threshold, pattern or allowed set rendered as text
    """

    model_config = ConfigDict(frozen=True)

    # observed_value may be a list or dict, so instances are not hashable
    __hash__ = None

    field: str = Field(default="", description="Field identifier, empty until bound")
    observed_value: Any = Field(default=None, description="Value that failed the rule")
    kind: ValidatorKind | str = Field(description="Rule kind that failed")
    constraint: str = Field(default="", description="Rule threshold/pattern/allowed set")

    @field_validator("kind", mode="before")
    @classmethod
    def resolve_kind(cls, v: Any) -> Any:
        if isinstance(v, str):
            return ValidatorKind.from_tag(v)
        return v

    @property
    def message(self) -> str:
        """Human-readable description of the failure."""
        return format_validation_message(
            self.field, self.observed_value, self.kind, self.constraint
        )

    def with_field(self, field: str) -> "ValidationError":
        """Return a copy of this error carrying the given field identifier."""
        return self.model_copy(update={"field": field})

    def __str__(self) -> str:
        return self.message


class RuleSyntaxError(BaseModel):
    """A rule expression that could not be parsed or applied.

    Attributes:
        field: Field identifier, empty until bound
        expression: Raw rule text
        near: Token or position where parsing broke
        comment: Free-text diagnostic
    """

    model_config = ConfigDict(frozen=True)

    field: str = Field(default="", description="Field identifier, empty until bound")
    expression: str = Field(description="Raw rule expression")
    near: str = Field(description="Token where parsing broke")
    comment: str = Field(description="Diagnostic text")

    @property
    def message(self) -> str:
        """Human-readable description of the syntax failure."""
        return format_syntax_message(self.field, self.expression, self.near, self.comment)

    def with_field(self, field: str) -> "RuleSyntaxError":
        """Return a copy of this error carrying the given field identifier."""
        return self.model_copy(update={"field": field})

    def __str__(self) -> str:
        return self.message
