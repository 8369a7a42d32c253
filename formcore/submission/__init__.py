"""Submission: validate a candidate record, then commit it atomically."""

from formcore.submission.models import (
    SubmissionAccepted,
    SubmissionOutcome,
    SubmissionRejected,
)
from formcore.submission.pipeline import SubmissionPipeline

__all__ = [
    "SubmissionAccepted",
    "SubmissionOutcome",
    "SubmissionPipeline",
    "SubmissionRejected",
]
