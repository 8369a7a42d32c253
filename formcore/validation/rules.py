"""Rule factories for building field schemas.

Each factory returns a ``Rule``. Default messages follow the yup wording
the forms were designed against, with ``{label}`` filled in per field.

Length, pattern, one-of and date rules skip a missing (``None``) value;
``required`` is the rule that rejects it.
Length and pattern rules measure text; a non-string value fails them.
"""

import re
from collections.abc import Callable, Iterable
from datetime import date, datetime
from enum import Enum
from typing import Any

from formcore.errors import SchemaConfigurationError
from formcore.validation.enums import RuleKind
from formcore.validation.models import Rule, RuleContext


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def required(message: str = "{label} is a required field") -> Rule:
    """Value must be present; empty strings count as missing."""
    return Rule(
        kind=RuleKind.REQUIRED,
        message=message,
        predicate=lambda value, _ctx: not _is_empty(value),
    )


def min_length(limit: int, message: str | None = None) -> Rule:
    """Character count must be at least ``limit``."""
    if limit < 0:
        raise SchemaConfigurationError(f"min_length must be >= 0, got {limit}")
    return Rule(
        kind=RuleKind.MIN_LENGTH,
        message=message or f"{{label}} must be at least {limit} characters",
        predicate=lambda value, _ctx: value is None or len(value) >= limit,
    )


def max_length(limit: int, message: str | None = None) -> Rule:
    """Character count must be at most ``limit``."""
    if limit < 0:
        raise SchemaConfigurationError(f"max_length must be >= 0, got {limit}")
    return Rule(
        kind=RuleKind.MAX_LENGTH,
        message=message or f"{{label}} must be at most {limit} characters",
        predicate=lambda value, _ctx: value is None or len(value) <= limit,
    )


def matches(pattern: str, message: str | None = None) -> Rule:
    """String must match ``pattern`` (searched, like a JavaScript regex test)."""
    try:
        compiled = re.compile(pattern)
    except re.error as e:
        raise SchemaConfigurationError(f"Invalid regex pattern {pattern!r}: {e}") from e

    return Rule(
        kind=RuleKind.PATTERN,
        message=message or f'{{label}} must match the following: "{pattern}"',
        predicate=lambda value, _ctx: value is None
        or compiled.search(value) is not None,
    )


def one_of(values: Iterable[Any], message: str | None = None) -> Rule:
    """Value must be one of ``values``. Enum members match their values too."""
    allowed = tuple(values)
    if not allowed:
        raise SchemaConfigurationError("one_of needs at least one allowed value")

    accepted = set(allowed) | {v.value for v in allowed if isinstance(v, Enum)}
    shown = ", ".join(str(v.value if isinstance(v, Enum) else v) for v in allowed)

    return Rule(
        kind=RuleKind.ONE_OF,
        message=message or f"{{label}} must be one of the following values: {shown}",
        predicate=lambda value, _ctx: value is None or value in accepted,
    )


def parse_date(value: Any) -> date | None:
    """Interpret ``value`` as a date, accepting ISO 8601 strings."""
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return None
    return None


def is_date(message: str = "{label} must be a `date` type") -> Rule:
    """Value must be a date, a datetime or an ISO 8601 date string."""
    return Rule(
        kind=RuleKind.DATE,
        message=message,
        predicate=lambda value, _ctx: value is None or parse_date(value) is not None,
    )


def custom(
    name: str,
    message: str,
    predicate: Callable[[Any, RuleContext], bool],
) -> Rule:
    """Custom rule.

    ``predicate`` receives the value and the pass's ``RuleContext``, giving
    access to sibling fields and the validation instant. It must not mutate
    anything.
    """
    if not callable(predicate):
        raise SchemaConfigurationError(f"Rule {name!r} predicate is not callable")
    return Rule(kind=RuleKind.CUSTOM, name=name, message=message, predicate=predicate)
