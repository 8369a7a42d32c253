"""Exception types for formcore.

Validation failures are never raised; they are returned as a
``ValidationResult``. Exceptions here signal programming errors.
"""


class FormCoreError(Exception):
    """Base class for all formcore errors."""


class SchemaConfigurationError(FormCoreError):
    """A form schema is misdefined.

    Raised while the schema is being built, never during validation.
    """


class UnknownFieldError(FormCoreError, KeyError):
    """A field name that the form does not declare was accessed."""

    def __init__(self, field: str) -> None:
        super().__init__(field)
        self.field = field

    def __str__(self) -> str:
        return f"Unknown field: {self.field!r}"
