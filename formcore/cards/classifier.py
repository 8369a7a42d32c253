"""Card number classification.

Determines the issuer network of a card number from fixed prefix ranges
and checks it against the Luhn mod-10 algorithm.

Input normalization: spaces and hyphens are treated as visual separators
and dropped. Any other non-digit character makes the number unparseable,
which classifies as ``valid=False`` / ``CardNetwork.UNKNOWN`` rather than
being silently discarded.
"""

from typing import Any

from formcore.cards.enums import CardNetwork
from formcore.cards.models import CardClassification, NetworkPrefix

MIN_CARD_LENGTH = 13
MAX_CARD_LENGTH = 19

SEPARATORS = frozenset(" -")

NETWORK_PREFIXES: tuple[NetworkPrefix, ...] = (
    NetworkPrefix(network=CardNetwork.VISA, start=4, end=4),
    NetworkPrefix(network=CardNetwork.MASTERCARD, start=51, end=55),
    NetworkPrefix(network=CardNetwork.MASTERCARD, start=2221, end=2720),
    NetworkPrefix(network=CardNetwork.AMEX, start=34, end=34),
    NetworkPrefix(network=CardNetwork.AMEX, start=37, end=37),
)

# Accepted digit counts per network
NETWORK_LENGTHS: dict[CardNetwork, tuple[int, int]] = {
    CardNetwork.VISA: (MIN_CARD_LENGTH, MAX_CARD_LENGTH),
    CardNetwork.MASTERCARD: (MIN_CARD_LENGTH, MAX_CARD_LENGTH),
    CardNetwork.AMEX: (MIN_CARD_LENGTH, MAX_CARD_LENGTH),
    CardNetwork.UNKNOWN: (MIN_CARD_LENGTH, MAX_CARD_LENGTH),
}


def normalize(raw: Any) -> str | None:
    """Return the digit string of ``raw`` or None if it is unparseable."""
    if not isinstance(raw, str):
        return None

    digits = "".join(ch for ch in raw if ch not in SEPARATORS)
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    return digits


def luhn_checksum_ok(digits: str) -> bool:
    """Check a digit string against the Luhn mod-10 algorithm."""
    if not digits or not digits.isdigit():
        return False

    total = 0
    for position, char in enumerate(reversed(digits)):
        value = int(char)
        if position % 2 == 1:
            value *= 2
            if value > 9:
                value -= 9
        total += value
    return total % 10 == 0


def detect_network(digits: str) -> CardNetwork:
    """Match the leading digits against the network prefix table."""
    for prefix in NETWORK_PREFIXES:
        if prefix.matches(digits):
            return prefix.network
    return CardNetwork.UNKNOWN


def classify(raw: Any) -> CardClassification:
    """Classify a raw card number.

    Never raises: unparseable input yields an invalid, unknown-network
    classification.
    """
    digits = normalize(raw)
    if digits is None:
        return CardClassification(valid=False)

    network = detect_network(digits)
    min_length, max_length = NETWORK_LENGTHS[network]
    valid = min_length <= len(digits) <= max_length and luhn_checksum_ok(digits)

    return CardClassification(valid=valid, network=network, digits=digits)


def card_type(raw: Any) -> CardNetwork | None:
    """Derived card type of a number, or None when the number is not valid."""
    classification = classify(raw)
    if not classification.valid:
        return None
    return classification.network
