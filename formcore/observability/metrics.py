"""Prometheus metrics for form submissions and validation."""

from prometheus_client import Counter

SUBMISSIONS = Counter(
    "formcore_submissions_total",
    "Total number of form submissions",
    labelnames=["form", "outcome"],
)

VALIDATION_ERRORS = Counter(
    "formcore_validation_errors_total",
    "Field errors reported by rejected submissions",
    labelnames=["form", "field"],
)

LATCH_ACTIVATIONS = Counter(
    "formcore_latch_activations_total",
    "Automatic activations of completion latches",
    labelnames=["form"],
)
