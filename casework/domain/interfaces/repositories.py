"""Repository interfaces for data persistence."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from casework.domain.entities import (
    DestinationOutcome,
    GiftCardPayment,
    HomeworkAssignment,
    HomeworkFilter,
    Participant,
    PaymentHistoryEntry,
    Shift,
)


class ParticipantRepository(ABC):
    """
    Abstract repository for Participant persistence.

    Implementations may use PostgreSQL, in-memory storage, etc.
    """

    @abstractmethod
    async def save(self, participant: Participant) -> Participant:
        """
        Persist a new participant.

        Args:
            participant: The participant to save

        Returns:
            The saved participant
        """
        ...

    @abstractmethod
    async def get_by_id(self, participant_id: str) -> Optional[Participant]:
        """
        Retrieve a participant by ID.

        Returns:
            The participant if found, None otherwise
        """
        ...

    @abstractmethod
    async def lock_for_update(self, participant_id: str) -> Optional[Participant]:
        """
        Retrieve a participant and hold a row lock until the transaction ends.

        Concurrent callers locking the same participant block until the
        holder commits or rolls back.

        Returns:
            The participant if found, None otherwise
        """
        ...

    @abstractmethod
    async def list_all(self) -> List[Participant]:
        """
        Retrieve all participants ordered by last name.

        Returned participants carry their shift and payment counts.
        """
        ...


class PaymentRepository(ABC):
    """
    Abstract repository for gift-card payments.

    Payments are append-only: there is no update or delete.
    """

    @abstractmethod
    async def find_history(self, participant_id: str) -> List[PaymentHistoryEntry]:
        """
        Retrieve the amount and issue time of every payment for a participant.

        Args:
            participant_id: The participant's identifier

        Returns:
            All payments for the participant; empty for unknown participants
        """
        ...

    @abstractmethod
    async def create(self, payment: GiftCardPayment) -> GiftCardPayment:
        """
        Persist a new payment.

        Returns:
            The stored payment with participant and issuer materialized
        """
        ...

    @abstractmethod
    async def list(self, participant_id: Optional[str] = None) -> List[GiftCardPayment]:
        """
        Retrieve payments, newest first.

        Args:
            participant_id: Restrict to one participant when given
        """
        ...


class ShiftRepository(ABC):
    """Abstract repository for Shift persistence."""

    @abstractmethod
    async def save(self, shift: Shift) -> Shift:
        ...

    @abstractmethod
    async def update(self, shift: Shift) -> Shift:
        ...

    @abstractmethod
    async def delete(self, shift_id: str) -> bool:
        """
        Delete a shift.

        Returns:
            True if a shift was deleted, False if none existed
        """
        ...

    @abstractmethod
    async def get_by_id(self, shift_id: str) -> Optional[Shift]:
        ...

    @abstractmethod
    async def get_active_for_participant(self, participant_id: str) -> Optional[Shift]:
        """Retrieve the participant's open shift, if any."""
        ...

    @abstractmethod
    async def list(
        self,
        participant_id: Optional[str] = None,
        active_only: bool = False,
    ) -> List[Shift]:
        """Retrieve shifts ordered by clock-in descending."""
        ...


class HomeworkRepository(ABC):
    """Abstract repository for HomeworkAssignment persistence."""

    @abstractmethod
    async def save(self, homework: HomeworkAssignment) -> HomeworkAssignment:
        ...

    @abstractmethod
    async def update(self, homework: HomeworkAssignment) -> HomeworkAssignment:
        ...

    @abstractmethod
    async def delete(self, homework_id: str) -> bool:
        ...

    @abstractmethod
    async def get_by_id(self, homework_id: str) -> Optional[HomeworkAssignment]:
        ...

    @abstractmethod
    async def list(
        self,
        now: datetime,
        participant_id: Optional[str] = None,
        status_filter: Optional[HomeworkFilter] = None,
    ) -> List[HomeworkAssignment]:
        """
        Retrieve homework assignments.

        Ordered incomplete first, then by due date ascending, then by
        assigned date descending.

        Args:
            now: Reference time for the overdue filter
            participant_id: Restrict to one participant when given
            status_filter: Optional overdue/pending/completed filter
        """
        ...


class OutcomeRepository(ABC):
    """Abstract repository for DestinationOutcome persistence."""

    @abstractmethod
    async def save(self, outcome: DestinationOutcome) -> DestinationOutcome:
        ...

    @abstractmethod
    async def list(self, participant_id: Optional[str] = None) -> List[DestinationOutcome]:
        """Retrieve outcomes, newest first."""
        ...

