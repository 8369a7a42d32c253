"""Controlled field state: in-progress records, picker bindings and latches."""

from formcore.store.enums import LatchState
from formcore.store.field_store import FieldStore, is_filled
from formcore.store.latch import CompletionLatch, Latch
from formcore.store.subscription import Subscription

__all__ = [
    "CompletionLatch",
    "FieldStore",
    "Latch",
    "LatchState",
    "Subscription",
    "is_filled",
]
