"""Schema-driven validation of form records.

Schemas are tables of (field, rule, message) entries evaluated by a single
interpreter, producing a per-field error mapping.
"""

from formcore.validation.enums import RuleKind, ValueKind
from formcore.validation.models import (
    FieldSchema,
    Rule,
    RuleContext,
    ValidationResult,
)
from formcore.validation.schema import FormSchema

__all__ = [
    # Enums
    "RuleKind",
    "ValueKind",
    # Models
    "FieldSchema",
    "Rule",
    "RuleContext",
    "ValidationResult",
    # Interpreter
    "FormSchema",
]
