"""Enums for the field store domain."""

from enum import Enum


class LatchState(str, Enum):
    """State of a two-state latch."""

    INACTIVE = "inactive"
    ACTIVE = "active"
