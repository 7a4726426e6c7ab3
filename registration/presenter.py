import html
from typing import Dict, Optional

from pydantic import BaseModel, Field

from registration.state import (
    FIELDS,
    PartialFieldFailure,
    PersistenceFailure,
    Outcome,
    RegistrationInput,
    Success,
)

SUCCESS_BANNER = "Registration successful! You can now view all users."
EMAIL_PASSWORD_OK_BANNER = (
    "Email and password are valid. Please complete the remaining fields correctly."
)

REDISPLAYED_FIELDS = tuple(f for f in FIELDS if f != "password")


class FormView(BaseModel):
    values: Dict[str, str] = Field(default_factory=dict)
    errors: Dict[str, str] = Field(default_factory=dict)
    banner: Optional[str] = None


def build_form_view(form: RegistrationInput, outcome: Outcome) -> FormView:
    """
    What the form page shows after a submission. Entered values come back
    escaped for display; the password is never echoed.
    """
    if isinstance(outcome, Success):
        return FormView(
            values={field: "" for field in REDISPLAYED_FIELDS},
            banner=SUCCESS_BANNER,
        )

    trimmed = form.trimmed()
    values = {field: html.escape(getattr(trimmed, field)) for field in REDISPLAYED_FIELDS}

    if isinstance(outcome, PartialFieldFailure):
        banner = EMAIL_PASSWORD_OK_BANNER if outcome.result.only_other_fields_invalid else None
        return FormView(values=values, errors=outcome.result.errors, banner=banner)

    if isinstance(outcome, PersistenceFailure):
        return FormView(values=values, banner=outcome.reason)

    raise TypeError(f"Unknown outcome: {outcome!r}")
