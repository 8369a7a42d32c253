"""Enums for the cards domain."""

from enum import Enum


class CardNetwork(str, Enum):
    """Issuer network detected from a card number prefix."""

    VISA = "visa"
    MASTERCARD = "mastercard"
    AMEX = "amex"
    UNKNOWN = "unknown"  # Prefix matches no known network
