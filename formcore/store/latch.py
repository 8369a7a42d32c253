"""Edge-triggered latches for one-time UI transitions."""

from collections.abc import Callable, Iterable
from typing import Any

from formcore.observability.logging import get_logger
from formcore.store.enums import LatchState
from formcore.store.field_store import FieldStore, is_filled
from formcore.store.subscription import Subscription

logger = get_logger(__name__)


class Latch:
    """Two-state machine that fires once on a rising edge.

    INACTIVE -> ACTIVE only on the rising edge of the observed condition,
    and only while armed; firing disarms it. ACTIVE -> INACTIVE only via
    ``toggle``/``deactivate``. ``reset`` re-arms.
    """

    def __init__(self, name: str = "latch") -> None:
        self.name = name
        self._state = LatchState.INACTIVE
        self._armed = True
        self._level = False
        self._callbacks: list[Callable[[], None]] = []
        self.activations = 0

    @property
    def state(self) -> LatchState:
        return self._state

    @property
    def active(self) -> bool:
        return self._state == LatchState.ACTIVE

    @property
    def armed(self) -> bool:
        return self._armed

    def on_activate(self, callback: Callable[[], None]) -> Subscription:
        self._callbacks.append(callback)
        return Subscription(lambda: self._callbacks.remove(callback))

    def observe(self, condition: bool) -> bool:
        """Feed the current condition level; returns True if the latch fired."""
        rising = condition and not self._level
        self._level = condition
        if not (rising and self._armed):
            return False

        self._armed = False
        self._state = LatchState.ACTIVE
        self.activations += 1
        logger.debug("latch_activated", latch=self.name, activations=self.activations)
        for callback in list(self._callbacks):
            callback()
        return True

    def toggle(self) -> LatchState:
        """Explicit user action: invert the state without re-arming."""
        self._state = (
            LatchState.INACTIVE if self.active else LatchState.ACTIVE
        )
        return self._state

    def deactivate(self) -> None:
        self._state = LatchState.INACTIVE

    def reset(self, level: bool = False) -> None:
        """Re-arm the latch in the INACTIVE state.

        ``level`` is the current condition; a condition that is already
        true must fall and rise again before the latch fires.
        """
        self._state = LatchState.INACTIVE
        self._armed = True
        self._level = level


class CompletionLatch:
    """Latch fed by "all watched fields are filled" on a field store."""

    def __init__(
        self,
        store: FieldStore,
        fields: Iterable[str],
        latch: Latch | None = None,
    ) -> None:
        self._store = store
        self._fields = tuple(fields)
        for field in self._fields:
            store.get(field)  # raises UnknownFieldError early

        self.latch = latch or Latch(name="completion")
        self._subscription = store.subscribe(self._on_change)
        self.latch.observe(self.complete)

    @property
    def fields(self) -> tuple[str, ...]:
        return self._fields

    @property
    def complete(self) -> bool:
        return all(is_filled(self._store.get(field)) for field in self._fields)

    def _on_change(self, field: str, _value: Any) -> None:
        if field in self._fields:
            self.latch.observe(self.complete)

    def reset(self) -> None:
        """Re-arm against the store's current contents."""
        self.latch.reset(level=self.complete)

    def close(self) -> None:
        self._subscription.cancel()
