from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Mapping

from ...app.records import USER_FIELDS
from ...errors import ValidationFailure

EMAIL_REGEX = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+", re.IGNORECASE)


@dataclass
class ValidationResult:
    ok: bool
    failure: ValidationFailure | None = None
    field_errors: dict[str, str] = field(default_factory=dict)

    @property
    def message(self) -> str | None:
        return self.failure.message if self.failure else None


def is_valid_email(value: str | None) -> bool:
    return EMAIL_REGEX.fullmatch(str(value or "")) is not None


def validate_draft(values: Mapping[str, str | None]) -> ValidationResult:
    missing = {key.value: f"{key.label} is required." for key in USER_FIELDS if not values.get(key.value)}
    if missing:
        return ValidationResult(ok=False, failure=ValidationFailure.MISSING_FIELDS, field_errors=missing)
    if not is_valid_email(values.get("email")):
        return ValidationResult(
            ok=False,
            failure=ValidationFailure.INVALID_EMAIL,
            field_errors={"email": ValidationFailure.INVALID_EMAIL.message},
        )
    return ValidationResult(ok=True)
