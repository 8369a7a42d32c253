"""Committed record models for the payment and profile forms."""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from formcore.forms.enums import Gender
from formcore.validation.rules import parse_date


class CardInfo(BaseModel):
    """Payment card details as entered on the card form."""

    model_config = ConfigDict(frozen=True)

    card_number: str = Field(..., description="Card number as typed")
    name_on_card: str = Field(..., description="Card owner name")
    expiry_month: str = Field(..., description="Two-digit expiry month")
    expiry_year: str = Field(..., description="Four-digit expiry year")
    cvc: str = Field(..., description="Card verification code")


class UserProfile(BaseModel):
    """User profile shown on the profile page."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Display name")
    title: str = Field(..., description="Job title")
    gender: Gender = Field(..., description="Gender selection")
    date_of_birth: date = Field(..., description="Date of birth")

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def _to_date(cls, value: Any) -> Any:
        parsed = parse_date(value)
        if isinstance(parsed, datetime):
            return parsed.date()
        return value if parsed is None else parsed
