"""Card numbers: issuer network detection and checksum validation."""

from formcore.cards.classifier import (
    MAX_CARD_LENGTH,
    MIN_CARD_LENGTH,
    card_type,
    classify,
    detect_network,
    luhn_checksum_ok,
)
from formcore.cards.enums import CardNetwork
from formcore.cards.models import CardClassification

__all__ = [
    "CardClassification",
    "CardNetwork",
    "MAX_CARD_LENGTH",
    "MIN_CARD_LENGTH",
    "card_type",
    "classify",
    "detect_network",
    "luhn_checksum_ok",
]
