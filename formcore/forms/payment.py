"""Payment card form.

The card is shown face up while the number, owner and expiry are typed.
The first time all four are filled in at once the card flips over to
reveal the CVC side. After that only the flip button turns it, and a
submission always turns it face up again. The issuer network is derived
from the card number when a submission is committed.
"""

import re
from collections.abc import Callable
from datetime import datetime
from typing import Any

from formcore.cards.classifier import card_type, classify
from formcore.cards.enums import CardNetwork
from formcore.config import get_settings
from formcore.config.models.forms import PaymentFormConfig
from formcore.forms.base import FormController
from formcore.forms.models import CardInfo
from formcore.observability.metrics import LATCH_ACTIVATIONS
from formcore.store.field_store import FieldStore
from formcore.store.latch import CompletionLatch, Latch
from formcore.submission.pipeline import SubmissionPipeline
from formcore.validation.models import FieldSchema, RuleContext
from formcore.validation.rules import (
    custom,
    matches,
    max_length,
    min_length,
    required,
)
from formcore.validation.schema import FormSchema

CARD_FIELDS = ("card_number", "name_on_card", "expiry_month", "expiry_year", "cvc")

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_leading_int(value: Any) -> int | None:
    """Integer formed by the leading digits of ``value``, like JS parseInt."""
    if not isinstance(value, str):
        return None
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None


def _card_number_valid(value: Any, _ctx: RuleContext) -> bool:
    return classify(value).valid


def _month_in_range(value: Any, _ctx: RuleContext) -> bool:
    month = parse_leading_int(value)
    return month is not None and 1 <= month <= 12


def _year_not_past(value: Any, ctx: RuleContext) -> bool:
    year = parse_leading_int(value)
    return year is not None and year >= ctx.now.year


def build_payment_schema(clock: Callable[[], datetime] | None = None) -> FormSchema:
    """Schema for CardInfo. ``clock`` drives the expiry year check (local time by default)."""
    return FormSchema(
        "payment",
        [
            FieldSchema(
                name="card_number",
                label="Card number",
                rules=(
                    required(),
                    min_length(4),
                    max_length(16),
                    custom("test-credit-number", "Credit Card number is invalid", _card_number_valid),
                ),
            ),
            FieldSchema(
                name="cvc",
                label="CVC",
                rules=(
                    required(),
                    min_length(3),
                    max_length(4),
                    matches(r"^[0-9]+$", "Invalid CVC number format"),
                ),
            ),
            FieldSchema(
                name="name_on_card",
                label="Card owner name",
                rules=(required(),),
            ),
            FieldSchema(
                name="expiry_month",
                label="Expiry month",
                rules=(
                    required(),
                    min_length(2),
                    max_length(2),
                    custom("is-valid-month", "Month must be between 1 and 12", _month_in_range),
                ),
            ),
            FieldSchema(
                name="expiry_year",
                label="Expiry Year",
                rules=(
                    required(),
                    matches(r"^(20)\d{2}$", "Invalid year format"),
                    min_length(4),
                    max_length(4),
                    custom(
                        "is-greater-than-or-equal",
                        "Year must be greater than or equal to the current year",
                        _year_not_past,
                    ),
                ),
            ),
        ],
        clock=clock,
    )


PAYMENT_SCHEMA = build_payment_schema()


def _derive_card_type(record: CardInfo) -> CardNetwork | None:
    return card_type(record.card_number)


class PaymentForm(FormController[CardInfo]):
    """Card entry form with flip latch and derived card type."""

    def __init__(
        self,
        schema: FormSchema | None = None,
        config: PaymentFormConfig | None = None,
    ) -> None:
        config = config or get_settings().forms.payment
        schema = schema or PAYMENT_SCHEMA
        self.config = config

        store = FieldStore(CARD_FIELDS)
        pipeline = SubmissionPipeline(schema, CardInfo, derive=_derive_card_type)
        super().__init__(schema, store, pipeline, config.revalidate_on_change)

        self.flip_latch = CompletionLatch(
            store, config.flip_trigger_fields, Latch(name="card_flip")
        )
        self.flip_latch.latch.on_activate(
            lambda: LATCH_ACTIVATIONS.labels(form=schema.name).inc()
        )
        pipeline.on_begin(self.flip_latch.latch.deactivate)

    @property
    def flipped(self) -> bool:
        """Whether the CVC side of the card is showing."""
        return self.flip_latch.latch.active

    def flip(self) -> bool:
        """Explicit flip button."""
        self.flip_latch.latch.toggle()
        return self.flipped

    @property
    def card_type(self) -> CardNetwork | None:
        """Network of the last committed card, None before the first commit."""
        return self.pipeline.derived

    def _on_field_change(self, field: str, value: Any) -> None:
        if field == "card_number" and self.config.invalidate_card_type_on_edit:
            self.pipeline.invalidate_derived()
        super()._on_field_change(field, value)
