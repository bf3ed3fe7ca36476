"""Shift-related domain exceptions."""

from .base import DomainException


class ShiftNotFoundException(DomainException):
    """Raised when a shift cannot be found."""

    def __init__(self, shift_id: str):
        super().__init__(
            message=f"Shift not found: {shift_id}",
            code="SHIFT_NOT_FOUND",
        )
        self.shift_id = shift_id


class AlreadyClockedInException(DomainException):
    """Raised when a participant with an open shift tries to clock in."""

    def __init__(self, participant_id: str):
        super().__init__(
            message="Participant is already clocked in",
            code="ALREADY_CLOCKED_IN",
        )
        self.participant_id = participant_id
