"""Payment-related domain exceptions."""

from .base import DomainException


class PaymentNotAllowedException(DomainException):
    """
    Raised when issuance is rejected by the eligibility rules.

    This is an expected, user-actionable outcome. The eligibility
    result is attached so callers can show the participant's standing.
    """

    def __init__(self, eligibility):
        super().__init__(
            message=eligibility.reason or "Payment not allowed",
            code="PAYMENT_NOT_ALLOWED",
        )
        self.eligibility = eligibility
