"""Controlled field store.

Holds the in-progress record of one form instance together with the
auxiliary UI selections (date picker, select boxes) that feed it.
"""

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from formcore.errors import UnknownFieldError
from formcore.observability.logging import get_logger
from formcore.store.subscription import Subscription

logger = get_logger(__name__)

FieldListener = Callable[[str, Any], None]
SelectionListener = Callable[[Any], None]


def is_filled(value: Any) -> bool:
    """True for any value other than None or an empty string."""
    return value is not None and value != ""


class FieldStore:
    """In-memory record plus auxiliary selections for one form.

    Auxiliary bindings are one-way: a selection overwrites its bound record
    field, while edits to the record never reach the selection. Selections
    must be re-seeded explicitly when the record is replaced.
    """

    def __init__(
        self,
        fields: Iterable[str],
        initial: Mapping[str, Any] | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            fields: Names of the record fields
            initial: Starting values; missing fields start as None
        """
        self._fields: tuple[str, ...] = tuple(fields)
        self._values: dict[str, Any] = dict.fromkeys(self._fields)
        self._selections: dict[str, Any] = {}
        self._field_listeners: list[FieldListener] = []
        self._selection_listeners: dict[str, list[SelectionListener]] = {}

        if initial:
            self._values = self._coerce(initial)

    @property
    def fields(self) -> tuple[str, ...]:
        return self._fields

    def _check(self, field: str) -> None:
        if field not in self._values:
            raise UnknownFieldError(field)

    def _coerce(self, record: Mapping[str, Any]) -> dict[str, Any]:
        for field in record:
            self._check(field)
        return {field: record.get(field) for field in self._fields}

    def get(self, field: str) -> Any:
        self._check(field)
        return self._values[field]

    def values(self) -> dict[str, Any]:
        """Snapshot of the current record."""
        return dict(self._values)

    def set(self, field: str, value: Any) -> None:
        """Set one field and notify listeners."""
        self._check(field)
        self._values[field] = value
        self._notify(field, value)

    def replace(self, record: Mapping[str, Any]) -> None:
        """Replace the whole record, then notify listeners for every field."""
        self._values = self._coerce(record)
        for field in self._fields:
            self._notify(field, self._values[field])

    def subscribe(self, listener: FieldListener) -> Subscription:
        """Register a listener called with ``(field, value)`` after each change."""
        self._field_listeners.append(listener)
        return Subscription(lambda: self._field_listeners.remove(listener))

    def _notify(self, field: str, value: Any) -> None:
        for listener in list(self._field_listeners):
            listener(field, value)

    # Auxiliary selections

    def selection(self, aux_key: str) -> Any:
        return self._selections.get(aux_key)

    def select(self, aux_key: str, value: Any) -> None:
        """Record a picker emission.

        A non-None selection is pushed to every binding of ``aux_key``.
        None clears the selection and leaves the record untouched.
        """
        if value is None:
            self._selections.pop(aux_key, None)
            return

        self._selections[aux_key] = value
        for listener in list(self._selection_listeners.get(aux_key, ())):
            listener(value)

    def bind_auxiliary(self, aux_key: str, record_field: str) -> Subscription:
        """Bind a selection to a record field (selection -> record only).

        Raises:
            UnknownFieldError: If ``record_field`` is not a record field
        """
        self._check(record_field)

        def push(value: Any) -> None:
            self.set(record_field, value)

        listeners = self._selection_listeners.setdefault(aux_key, [])
        listeners.append(push)
        logger.debug("auxiliary_bound", aux_key=aux_key, field=record_field)
        return Subscription(lambda: listeners.remove(push))

    def seed_auxiliary(self, seeds: Mapping[str, Any]) -> None:
        """Re-seed selections, e.g. from a freshly committed record."""
        for aux_key, value in seeds.items():
            self.select(aux_key, value)

    def clear_selections(self) -> None:
        self._selections.clear()
