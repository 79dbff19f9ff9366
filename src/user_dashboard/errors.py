"""Errors surfaced to the operator as the dashboard status message.

Each error carries the text shown to the operator. Transport details stay on
the chained ``__cause__`` and only reach the logs.
"""

from __future__ import annotations

from enum import Enum

LOAD_FAILED_MESSAGE = "Failed to load users."
MISSING_FIELDS_MESSAGE = "All fields are required."
INVALID_EMAIL_MESSAGE = "Please enter a valid email."
SAVE_FAILED_MESSAGE = "Failed to save user."
DELETE_FAILED_MESSAGE = "Failed to delete user."
IN_FLIGHT_MESSAGE = "Another change to this user is still in progress."
NOT_FOUND_MESSAGE = "User not found."


class ValidationFailure(str, Enum):
    MISSING_FIELDS = "missing_fields"
    INVALID_EMAIL = "invalid_email"

    @property
    def message(self) -> str:
        if self is ValidationFailure.MISSING_FIELDS:
            return MISSING_FIELDS_MESSAGE
        return INVALID_EMAIL_MESSAGE


class DashboardError(Exception):
    default_message = "Unexpected dashboard error."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class LoadError(DashboardError):
    default_message = LOAD_FAILED_MESSAGE


class ValidationError(DashboardError):
    def __init__(self, failure: ValidationFailure) -> None:
        self.failure = failure
        super().__init__(failure.message)


class SaveError(DashboardError):
    default_message = SAVE_FAILED_MESSAGE


class DeleteError(DashboardError):
    default_message = DELETE_FAILED_MESSAGE


class MutationInFlightError(DashboardError):
    default_message = IN_FLIGHT_MESSAGE


class RecordNotFoundError(DashboardError):
    default_message = NOT_FOUND_MESSAGE
