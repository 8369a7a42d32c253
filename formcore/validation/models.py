"""Validation domain models.

Contains the Pydantic models describing field rules and validation results.
"""

from collections.abc import Callable, Mapping
from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from formcore.errors import SchemaConfigurationError
from formcore.validation.enums import RuleKind, ValueKind

STRING_TYPE_MESSAGE = "{label} must be a `string` type"


def local_now() -> datetime:
    """Return the current time in the local time zone."""
    return datetime.now().astimezone()


class RuleContext(BaseModel):
    """Read-only view handed to every rule predicate.

    Built once per validation pass so every rule of that pass sees the
    same record and the same instant.
    """

    model_config = ConfigDict(frozen=True)

    record: Mapping[str, Any] = Field(
        default_factory=dict, description="Candidate record being validated"
    )
    now: datetime = Field(default_factory=local_now, description="Wall-clock time of the pass")

    def sibling(self, field: str) -> Any:
        """Value of another field in the candidate record."""
        return self.record.get(field)


Predicate = Callable[[Any, RuleContext], bool]


class Rule(BaseModel):
    """A single check with the message reported when it fails.

    ``message`` may contain a ``{label}`` placeholder that is replaced with
    the owning field's label.
    """

    model_config = ConfigDict(frozen=True)

    kind: RuleKind = Field(..., description="Kind of check")
    message: str = Field(..., min_length=1, description="Error message template")
    predicate: Predicate = Field(..., description="Returns True when the value passes")
    name: str | None = Field(default=None, description="Identifier for custom rules")

    def render(self, label: str) -> str:
        return self.message.replace("{label}", label)

    def check(self, value: Any, context: RuleContext) -> bool:
        """Evaluate the predicate; malformed values count as failures."""
        try:
            return bool(self.predicate(value, context))
        except (TypeError, ValueError):
            return False


class FieldSchema(BaseModel):
    """Declarative rule set for one field."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Record field name")
    kind: ValueKind = Field(default=ValueKind.STRING, description="Value kind")
    label: str | None = Field(default=None, description="Name used in messages")
    rules: tuple[Rule, ...] = Field(..., description="Rules in evaluation order")

    @field_validator("rules")
    @classmethod
    def _rules_not_empty(cls, rules: tuple[Rule, ...]) -> tuple[Rule, ...]:
        if not rules:
            raise SchemaConfigurationError("Field schema needs at least one rule")
        return rules

    @property
    def display_label(self) -> str:
        return self.label or self.name

    def cast(self, value: Any) -> Any:
        """Coerce ``value`` to the field's kind where that is lossless.

        String fields accept numbers and turn them into their text form.
        Anything else is returned unchanged.
        """
        if (
            self.kind is ValueKind.STRING
            and isinstance(value, int | float | Decimal)
            and not isinstance(value, bool)
        ):
            return str(value)
        return value

    def type_error(self, value: Any) -> str | None:
        """Message for a value the field's kind cannot hold, after casting."""
        if self.kind is ValueKind.STRING and value is not None and not isinstance(value, str):
            return STRING_TYPE_MESSAGE.replace("{label}", self.display_label)
        return None

    def first_error(self, value: Any, context: RuleContext) -> str | None:
        """Message of the first failing rule, or None if every rule passes.

        ``value`` is cast to the field's kind first; a value of the wrong
        type fails before any rule runs.
        """
        value = self.cast(value)
        message = self.type_error(value)
        if message is not None:
            return message
        for rule in self.rules:
            if not rule.check(value, context):
                return rule.render(self.display_label)
        return None


class ValidationResult(BaseModel):
    """Per-field error mapping produced by one validation pass.

    A field with no entry is currently valid.
    """

    model_config = ConfigDict(frozen=True)

    errors: dict[str, str] = Field(default_factory=dict, description="Field name to message")

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def fields(self) -> list[str]:
        return list(self.errors)

    def get(self, field: str) -> str | None:
        return self.errors.get(field)

    def __contains__(self, field: object) -> bool:
        return field in self.errors
