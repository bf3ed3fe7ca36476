"""Participant-related domain exceptions."""

from .base import DomainException


class ParticipantNotFoundException(DomainException):
    """Raised when a participant cannot be found."""

    def __init__(self, participant_id: str):
        super().__init__(
            message=f"Participant not found: {participant_id}",
            code="PARTICIPANT_NOT_FOUND",
        )
        self.participant_id = participant_id
