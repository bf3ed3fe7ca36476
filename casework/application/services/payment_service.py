"""Payment service - orchestrates eligibility checks and gift-card issuance."""

from datetime import datetime, timezone, tzinfo
from typing import Callable, List, Optional

import structlog

from casework.domain.entities import GiftCardPayment, PaymentHistoryEntry
from casework.domain.exceptions import (
    InvalidRequestException,
    ParticipantNotFoundException,
    PaymentNotAllowedException,
    ShiftNotFoundException,
)
from casework.domain.interfaces import (
    ParticipantRepository,
    PaymentRepository,
    ShiftRepository,
)
from casework.application.dto import (
    IssuePaymentRequest,
    IssuePaymentResponse,
    PaymentResponse,
)
from casework.service.eligibility import (
    DEFAULT_POLICY,
    EligibilityResult,
    PaymentPolicy,
    PaymentSnapshot,
    PaymentStatus,
    build_payment_status,
    evaluate_eligibility,
)

logger = structlog.get_logger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class PaymentService:
    """
    Application service for gift-card payment use cases.

    Issuance locks the participant row before reading the payment
    history, so concurrent requests for the same participant are
    serialized and cannot both pass the caps.
    """

    def __init__(
        self,
        payment_repository: PaymentRepository,
        participant_repository: ParticipantRepository,
        shift_repository: ShiftRepository,
        policy: PaymentPolicy = DEFAULT_POLICY,
        program_timezone: Optional[tzinfo] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._payment_repo = payment_repository
        self._participant_repo = participant_repository
        self._shift_repo = shift_repository
        self._policy = policy
        self._tz = program_timezone
        self._clock = clock

    @property
    def policy(self) -> PaymentPolicy:
        return self._policy

    async def check_eligibility(self, participant_id: str) -> EligibilityResult:
        """
        Evaluate whether a new payment may be issued to a participant.

        Read-only. An unknown participant has no payments and is
        reported as eligible; existence checks belong to the caller.

        Args:
            participant_id: The participant's identifier

        Returns:
            EligibilityResult with the decision and payment standing
        """
        history = await self._payment_repo.find_history(participant_id)

        return evaluate_eligibility(
            payments=self._convert_history(history),
            now=self._local_now(),
            policy=self._policy,
        )

    async def get_payment_status(self, participant_id: str) -> PaymentStatus:
        """Eligibility plus program constants and progress, for display."""
        eligibility = await self.check_eligibility(participant_id)
        return build_payment_status(eligibility, self._policy)

    async def issue_payment(self, request: IssuePaymentRequest) -> IssuePaymentResponse:
        """
        Issue one flat-amount payment if the participant is eligible.

        Args:
            request: Participant, issuing staff member and optional shift/notes

        Returns:
            IssuePaymentResponse with the stored payment

        Raises:
            InvalidRequestException: If validation fails or the shift is someone else's
            ParticipantNotFoundException: If the participant doesn't exist
            ShiftNotFoundException: If the shift doesn't exist
            PaymentNotAllowedException: If a cap blocks the payment
        """
        errors = request.validate()
        if errors:
            raise InvalidRequestException("; ".join(errors))

        log = logger.bind(
            participant_id=request.participant_id,
            issued_by_id=request.issued_by_id,
        )

        # Held until the request transaction ends
        participant = await self._participant_repo.lock_for_update(request.participant_id)
        if participant is None:
            log.warning("payment_participant_not_found")
            raise ParticipantNotFoundException(request.participant_id)

        if request.shift_id:
            await self._check_shift(request.participant_id, request.shift_id)

        eligibility = await self.check_eligibility(request.participant_id)

        if not eligibility.allowed:
            log.info(
                "payment_rejected",
                reason=eligibility.reason,
                lifetime_total=eligibility.lifetime_total,
                paid_this_week=eligibility.paid_this_week,
                reached_lifetime_cap=eligibility.reached_lifetime_cap,
            )
            raise PaymentNotAllowedException(eligibility)

        payment = await self._payment_repo.create(
            GiftCardPayment(
                participant_id=request.participant_id,
                amount=self._policy.payment_amount,
                issued_by_id=request.issued_by_id,
                shift_id=request.shift_id or None,
                notes=request.notes or None,
                issued_at=self._clock(),
            )
        )

        log.info(
            "payment_issued",
            payment_id=payment.id,
            amount=payment.amount,
            lifetime_total=eligibility.lifetime_total + payment.amount,
        )

        return IssuePaymentResponse(
            payment=PaymentResponse.from_entity(payment),
            message=f"${self._policy.payment_amount} payment issued successfully",
            remaining_payments=eligibility.payments_remaining - 1,
        )

    async def list_payments(self, participant_id: Optional[str] = None) -> List[PaymentResponse]:
        """
        List payments newest first.

        Args:
            participant_id: Restrict to one participant when given
        """
        payments = await self._payment_repo.list(participant_id)

        logger.info(
            "payments_listed",
            participant_id=participant_id,
            count=len(payments),
        )

        return [PaymentResponse.from_entity(p) for p in payments]

    async def _check_shift(self, participant_id: str, shift_id: str) -> None:
        """The referenced shift must exist and be the participant's own."""
        shift = await self._shift_repo.get_by_id(shift_id)
        if shift is None:
            raise ShiftNotFoundException(shift_id)
        if shift.participant_id != participant_id:
            raise InvalidRequestException("Shift does not belong to this participant")

    def _local_now(self) -> datetime:
        """Current time in the program timezone (host local when unset)."""
        now = self._clock()
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return now.astimezone(self._tz)

    def _convert_history(self, history: List[PaymentHistoryEntry]) -> List[PaymentSnapshot]:
        """Convert stored payment rows to the eligibility module's format."""
        return [
            PaymentSnapshot(amount=entry.amount, issued_at=entry.issued_at)
            for entry in history
        ]
