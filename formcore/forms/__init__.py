"""The payment card and profile editing forms."""

from formcore.forms.base import FormController
from formcore.forms.enums import AuxiliaryKey, Gender
from formcore.forms.models import CardInfo, UserProfile
from formcore.forms.payment import PAYMENT_SCHEMA, PaymentForm, build_payment_schema
from formcore.forms.profile import PROFILE_SCHEMA, ProfileForm, default_profile

__all__ = [
    # Enums
    "AuxiliaryKey",
    "Gender",
    # Models
    "CardInfo",
    "UserProfile",
    # Schemas
    "PAYMENT_SCHEMA",
    "PROFILE_SCHEMA",
    "build_payment_schema",
    # Controllers
    "FormController",
    "PaymentForm",
    "ProfileForm",
    "default_profile",
]
