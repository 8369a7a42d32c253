"""Validate-then-commit submission pipeline."""

from collections.abc import Callable, Mapping
from typing import Any, Generic, NamedTuple, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from formcore.errors import SchemaConfigurationError
from formcore.observability.logging import get_logger
from formcore.observability.metrics import SUBMISSIONS, VALIDATION_ERRORS
from formcore.store.subscription import Subscription
from formcore.submission.models import (
    SubmissionAccepted,
    SubmissionOutcome,
    SubmissionRejected,
)
from formcore.validation.schema import FormSchema

logger = get_logger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class _Committed(NamedTuple):
    record: Any
    derived: Any


class SubmissionPipeline(Generic[RecordT]):
    """Runs the schema over a candidate and commits it only if it is valid.

    The committed record and the state derived from it are held in a single
    attribute, so a reader sees either the old pair or the new pair.
    """

    def __init__(
        self,
        schema: FormSchema,
        model: type[RecordT],
        initial: RecordT | None = None,
        derive: Callable[[RecordT], Any] | None = None,
        on_commit: Callable[[RecordT], None] | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            schema: Schema every candidate must pass
            model: Pydantic model of the committed record
            initial: Record committed before any submission
            derive: Computes derived state from a newly committed record
            on_commit: Called with each newly committed record
        """
        self._schema = schema
        self._model = model
        self._derive = derive
        self._on_commit = on_commit
        self._begin_hooks: list[Callable[[], None]] = []
        self._state = _Committed(record=initial, derived=None)
        self.attempts = 0

    @property
    def name(self) -> str:
        return self._schema.name

    @property
    def committed(self) -> RecordT | None:
        return self._state.record

    @property
    def derived(self) -> Any:
        return self._state.derived

    def on_begin(self, hook: Callable[[], None]) -> Subscription:
        """Register a hook run at the start of every submission."""
        self._begin_hooks.append(hook)
        return Subscription(lambda: self._begin_hooks.remove(hook))

    def invalidate_derived(self) -> None:
        self._state = self._state._replace(derived=None)

    def _build(self, candidate: Mapping[str, Any]) -> RecordT:
        try:
            return self._model.model_validate(self._schema.cast(candidate))
        except PydanticValidationError as e:
            raise SchemaConfigurationError(
                f"Schema {self.name!r} accepted a record that "
                f"{self._model.__name__} rejects: {e}"
            ) from e

    def submit(self, candidate: Mapping[str, Any]) -> SubmissionOutcome:
        """Validate ``candidate`` and commit it if every field passes.

        Returns:
            SubmissionAccepted with the typed record, or SubmissionRejected
            carrying the complete ValidationResult
        """
        self.attempts += 1
        for hook in list(self._begin_hooks):
            hook()

        result = self._schema.validate(candidate)
        if not result.is_valid:
            SUBMISSIONS.labels(form=self.name, outcome="rejected").inc()
            for field in result.fields:
                VALIDATION_ERRORS.labels(form=self.name, field=field).inc()
            logger.info(
                "submission_rejected",
                form=self.name,
                error_count=len(result.errors),
                fields=result.fields,
            )
            return SubmissionRejected(errors=result)

        record = self._build(candidate)
        derived = self._derive(record) if self._derive else None
        self._state = _Committed(record=record, derived=derived)

        SUBMISSIONS.labels(form=self.name, outcome="committed").inc()
        logger.info("submission_committed", form=self.name, attempt=self.attempts)

        if self._on_commit:
            self._on_commit(record)

        return SubmissionAccepted(record=record)
