"""Submission outcome models."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from formcore.validation.models import ValidationResult


class SubmissionAccepted(BaseModel):
    """The candidate passed validation and is now the committed record."""

    model_config = ConfigDict(frozen=True)

    ok: Literal[True] = Field(default=True, description="Submission succeeded")
    record: Any = Field(..., description="Typed, validated record")


class SubmissionRejected(BaseModel):
    """The candidate failed validation; nothing was committed."""

    model_config = ConfigDict(frozen=True)

    ok: Literal[False] = Field(default=False, description="Submission failed")
    errors: ValidationResult = Field(..., description="Every field error of the pass")


SubmissionOutcome = SubmissionAccepted | SubmissionRejected
