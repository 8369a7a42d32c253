"""Form schema interpreter.

Evaluates an ordered table of field rules against a candidate record.
"""

from collections.abc import Callable, Iterable, Mapping
from datetime import datetime
from typing import Any

from formcore.errors import SchemaConfigurationError
from formcore.observability.logging import get_logger
from formcore.validation.models import FieldSchema, RuleContext, ValidationResult, local_now

logger = get_logger(__name__)


class FormSchema:
    """Declarative validation schema for one form.

    Every field is evaluated on every pass. Within a field, rules run in
    declaration order and the first failing rule supplies the message.
    The clock is read once per pass, at call time, so time-dependent rules
    (such as "year must not be in the past") follow the real calendar.
    """

    def __init__(
        self,
        name: str,
        fields: Iterable[FieldSchema],
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Build the schema.

        Args:
            name: Form name, used in logs
            fields: Field schemas in display order
            clock: Source of the current time for time-dependent rules;
                defaults to local time, so "this year" is the user's calendar year

        Raises:
            SchemaConfigurationError: On an empty schema or duplicate field names
        """
        self.name = name
        self._clock = clock or local_now
        self._fields: dict[str, FieldSchema] = {}

        for field in fields:
            if field.name in self._fields:
                raise SchemaConfigurationError(
                    f"Duplicate field {field.name!r} in schema {name!r}"
                )
            self._fields[field.name] = field

        if not self._fields:
            raise SchemaConfigurationError(f"Schema {name!r} declares no fields")

    @property
    def field_names(self) -> list[str]:
        return list(self._fields)

    def field(self, name: str) -> FieldSchema:
        return self._fields[name]

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def cast(self, record: Mapping[str, Any]) -> dict[str, Any]:
        """Declared fields of ``record`` cast to their kinds; other keys dropped."""
        return {name: field.cast(record.get(name)) for name, field in self._fields.items()}

    def _context(self, record: Mapping[str, Any], now: datetime | None) -> RuleContext:
        return RuleContext(record=self.cast(record), now=now or self._clock())

    def validate(
        self,
        record: Mapping[str, Any],
        now: datetime | None = None,
    ) -> ValidationResult:
        """Validate a candidate record.

        Args:
            record: Candidate values keyed by field name; may be partial
            now: Validation instant; the schema clock is read when omitted

        Returns:
            A fresh ValidationResult; fields without an entry are valid
        """
        context = self._context(record, now)

        errors: dict[str, str] = {}
        for name, field in self._fields.items():
            message = field.first_error(record.get(name), context)
            if message is not None:
                errors[name] = message

        if errors:
            logger.debug(
                "schema_validation_failed",
                schema=self.name,
                error_count=len(errors),
                fields=list(errors),
            )

        return ValidationResult(errors=errors)

    def validate_field(
        self,
        name: str,
        record: Mapping[str, Any],
        now: datetime | None = None,
    ) -> str | None:
        """Message for a single field, or None when it is valid.

        Raises:
            KeyError: If the schema has no such field
        """
        field = self._fields[name]
        return field.first_error(record.get(name), self._context(record, now))
