"""Errors raised by the entry, medication and reminder services."""

from enum import Enum
from typing import Optional


class ValidationReason(str, Enum):
    """Why a mutating call was rejected."""
    SLEEP_OUT_OF_RANGE = "sleep_out_of_range"
    NEGATIVE_WEIGHT = "negative_weight"
    EMPTY_MEDICATION_NAME = "empty_medication_name"
    INVALID_REMINDER_TIME = "invalid_reminder_time"


MESSAGES = {
    ValidationReason.SLEEP_OUT_OF_RANGE: "Sleep must be between 0-24 hours",
    ValidationReason.NEGATIVE_WEIGHT: "Weight cannot be negative",
    ValidationReason.EMPTY_MEDICATION_NAME: "Medication name cannot be empty",
    ValidationReason.INVALID_REMINDER_TIME: "Reminder time must be HH:MM",
}


class EntryValidationError(ValueError):
    """
    Input rejected before any state was touched.

    The store and the persisted data are unchanged when this is raised.
    """

    def __init__(self, reason: ValidationReason, detail: Optional[str] = None):
        self.reason = reason
        message = MESSAGES[reason]
        if detail:
            message = f"{message} (got {detail})"
        super().__init__(message)
