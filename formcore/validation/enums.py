"""Enums for the validation domain."""

from enum import Enum


class ValueKind(str, Enum):
    """Kind of value a form field holds."""

    STRING = "string"
    DATE = "date"
    ENUM = "enum"


class RuleKind(str, Enum):
    """Kind of check a validation rule performs."""

    REQUIRED = "required"  # Value present and non-empty
    MIN_LENGTH = "min_length"  # Character count lower bound
    MAX_LENGTH = "max_length"  # Character count upper bound
    PATTERN = "pattern"  # Regular expression match
    ONE_OF = "one_of"  # Value in allowed set
    DATE = "date"  # Value is (or parses as) a date
    CUSTOM = "custom"  # Arbitrary predicate
