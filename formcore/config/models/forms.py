"""Form behaviour configuration models."""

from typing import Literal

from pydantic import BaseModel, Field

GenderValue = Literal["male", "female", "not specified"]


class PaymentFormConfig(BaseModel):
    """Payment card form behaviour."""

    revalidate_on_change: bool = Field(
        default=True,
        description="Recompute errors on every edit once a submission was attempted",
    )
    invalidate_card_type_on_edit: bool = Field(
        default=False,
        description="Clear the derived card type when the card number is edited",
    )
    flip_trigger_fields: list[str] = Field(
        default_factory=lambda: [
            "card_number",
            "name_on_card",
            "expiry_month",
            "expiry_year",
        ],
        min_length=1,
        description="Fields whose first joint completion flips the card",
    )


class ProfileDefaults(BaseModel):
    """Hardcoded starting profile for a fresh page view."""

    name: str = Field(default="Jordan Avery", description="Display name")
    title: str = Field(default="Senior front-end engineer", description="Job title")
    gender: GenderValue = Field(default="male", description="Gender selection")


class ProfileFormConfig(BaseModel):
    """Profile editing form behaviour."""

    revalidate_on_change: bool = Field(
        default=True,
        description="Recompute errors on every edit once a submission was attempted",
    )
    defaults: ProfileDefaults = Field(
        default_factory=ProfileDefaults,
        description="Initial committed profile",
    )


class FormsConfig(BaseModel):
    """Per-form configuration."""

    payment: PaymentFormConfig = Field(
        default_factory=PaymentFormConfig,
        description="Payment card form",
    )
    profile: ProfileFormConfig = Field(
        default_factory=ProfileFormConfig,
        description="Profile editing form",
    )
