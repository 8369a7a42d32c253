"""Configuration model exports.

    from formcore.config.models import FormsConfig, LoggingConfig
"""

from formcore.config.models.forms import (
    FormsConfig,
    PaymentFormConfig,
    ProfileDefaults,
    ProfileFormConfig,
)
from formcore.config.models.observability import LoggingConfig, ObservabilityConfig

__all__ = [
    "FormsConfig",
    "LoggingConfig",
    "ObservabilityConfig",
    "PaymentFormConfig",
    "ProfileDefaults",
    "ProfileFormConfig",
]
