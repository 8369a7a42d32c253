"""Cancellable listener registrations."""

from collections.abc import Callable


class Subscription:
    """Handle returned by every listener registration.

    Cancelling removes the listener; cancelling twice is a no-op.
    """

    def __init__(self, on_cancel: Callable[[], None]) -> None:
        self._on_cancel: Callable[[], None] | None = on_cancel

    @property
    def active(self) -> bool:
        return self._on_cancel is not None

    def cancel(self) -> None:
        if self._on_cancel is None:
            return
        on_cancel, self._on_cancel = self._on_cancel, None
        on_cancel()

    def __repr__(self) -> str:
        return f"Subscription(active={self.active})"
