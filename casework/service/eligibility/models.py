"""
Data models for payment eligibility.

These are plain value objects with no persistence concerns.
"""

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class PaymentSnapshot:
    """
    A past payment as seen by the eligibility rules.

    Attributes:
        amount: Amount paid in whole currency units
        issued_at: Timezone-aware issue time
    """

    amount: int
    issued_at: datetime


@dataclass(frozen=True)
class EligibilityResult:
    """
    Outcome of evaluating whether a new payment may be issued.

    ``reason`` is only set when ``allowed`` is False.
    """

    allowed: bool
    lifetime_total: int
    payments_count: int
    payments_remaining: int
    paid_this_week: bool
    reached_lifetime_cap: bool
    reason: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class PaymentStatus:
    """Eligibility plus the program constants, for status display."""

    eligibility: EligibilityResult
    max_payments: int
    payment_amount: int
    lifetime_cap: int
    progress_percentage: int

    @property
    def allowed(self) -> bool:
        return self.eligibility.allowed

    def to_dict(self) -> dict:
        return {
            **self.eligibility.to_dict(),
            "max_payments": self.max_payments,
            "payment_amount": self.payment_amount,
            "lifetime_cap": self.lifetime_cap,
            "progress_percentage": self.progress_percentage,
        }
