"""Shared behaviour of the form controllers."""

from typing import Any, Generic

from formcore.observability.logging import get_logger
from formcore.store.field_store import FieldStore
from formcore.submission.models import SubmissionOutcome, SubmissionRejected
from formcore.submission.pipeline import RecordT, SubmissionPipeline
from formcore.validation.models import ValidationResult
from formcore.validation.schema import FormSchema

logger = get_logger(__name__)


class FormController(Generic[RecordT]):
    """Wires a field store to a submission pipeline.

    Until the first submission attempt errors are only produced by
    ``submit``. Afterwards, when ``revalidate_on_change`` is set, every
    field change recomputes the full error mapping.
    """

    def __init__(
        self,
        schema: FormSchema,
        store: FieldStore,
        pipeline: SubmissionPipeline[RecordT],
        revalidate_on_change: bool = True,
    ) -> None:
        self.schema = schema
        self.store = store
        self.pipeline = pipeline
        self.revalidate_on_change = revalidate_on_change
        self._errors = ValidationResult()
        self._submitted = False
        self.store.subscribe(self._on_field_change)

    @property
    def errors(self) -> ValidationResult:
        return self._errors

    @property
    def submitted(self) -> bool:
        """Whether a submission has been attempted since the form was (re)opened."""
        return self._submitted

    @property
    def committed(self) -> RecordT | None:
        return self.pipeline.committed

    def get(self, field: str) -> Any:
        return self.store.get(field)

    def set(self, field: str, value: Any) -> None:
        self.store.set(field, value)

    def values(self) -> dict[str, Any]:
        return self.store.values()

    def _on_field_change(self, field: str, value: Any) -> None:  # noqa: ARG002
        if self._submitted and self.revalidate_on_change:
            self._errors = self.schema.validate(self.store.values())

    def _reset_errors(self) -> None:
        self._errors = ValidationResult()
        self._submitted = False

    def submit(self) -> SubmissionOutcome:
        """Submit the current store contents."""
        outcome = self.pipeline.submit(self.store.values())
        self._submitted = True
        if isinstance(outcome, SubmissionRejected):
            self._errors = outcome.errors
        else:
            self._errors = ValidationResult()
        return outcome
