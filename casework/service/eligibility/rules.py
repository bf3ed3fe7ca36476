"""
Eligibility Rules for the gift-card payment program.

A participant may receive a payment when both caps allow it:

1. Lifetime cap: the sum of all past payments must be below the cap.
   This check takes precedence over the weekly one.
2. Weekly cap: no payment may already exist in the current
   Sunday-Saturday week.

The functions here are pure; fetching payment history and writing new
payments is the application layer's job.
"""

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from .models import EligibilityResult, PaymentSnapshot, PaymentStatus
from .policy import PaymentPolicy
from .week import get_week_bounds, is_within_week

ALREADY_PAID_THIS_WEEK = (
    "Participant has already received a payment this week. "
    "Next payment available next Sunday."
)


def lifetime_limit_reason(policy: PaymentPolicy) -> str:
    """Human-readable rejection for a participant at the lifetime cap."""
    return (
        f"Participant has reached the ${policy.lifetime_cap:,} lifetime limit. "
        "No more payments can be issued."
    )


def calculate_lifetime_total(payments: Sequence[PaymentSnapshot]) -> int:
    return sum(p.amount for p in payments)


def calculate_payments_remaining(lifetime_total: int, policy: PaymentPolicy) -> int:
    """Full payments that still fit under the cap (never negative)."""
    return max(0, (policy.lifetime_cap - lifetime_total) // policy.payment_amount)


def paid_within_week(payments: Sequence[PaymentSnapshot], now: datetime) -> bool:
    """True if any payment was issued in the Sunday-Saturday week containing ``now``."""
    week_start, week_end = get_week_bounds(now)
    return any(is_within_week(p.issued_at, week_start, week_end) for p in payments)


def evaluate_eligibility(
    payments: Sequence[PaymentSnapshot],
    now: datetime,
    policy: PaymentPolicy,
) -> EligibilityResult:
    """
    Decide whether a new payment may be issued.

    Args:
        payments: Every past payment for the participant
        now: Timezone-aware current time in the program timezone
        policy: Payment amount and lifetime cap

    Returns:
        EligibilityResult describing the decision and the participant's standing
    """
    lifetime_total = calculate_lifetime_total(payments)
    payments_count = len(payments)

    if lifetime_total >= policy.lifetime_cap:
        return EligibilityResult(
            allowed=False,
            reason=lifetime_limit_reason(policy),
            lifetime_total=lifetime_total,
            payments_count=payments_count,
            payments_remaining=0,
            paid_this_week=False,
            reached_lifetime_cap=True,
        )

    payments_remaining = calculate_payments_remaining(lifetime_total, policy)

    if paid_within_week(payments, now):
        return EligibilityResult(
            allowed=False,
            reason=ALREADY_PAID_THIS_WEEK,
            lifetime_total=lifetime_total,
            payments_count=payments_count,
            payments_remaining=payments_remaining,
            paid_this_week=True,
            reached_lifetime_cap=False,
        )

    return EligibilityResult(
        allowed=True,
        lifetime_total=lifetime_total,
        payments_count=payments_count,
        payments_remaining=payments_remaining,
        paid_this_week=False,
        reached_lifetime_cap=False,
    )


def build_payment_status(
    eligibility: EligibilityResult,
    policy: PaymentPolicy,
) -> PaymentStatus:
    """Attach the program constants and progress toward the cap."""
    return PaymentStatus(
        eligibility=eligibility,
        max_payments=policy.max_payments,
        payment_amount=policy.payment_amount,
        lifetime_cap=policy.lifetime_cap,
        progress_percentage=progress_percentage(eligibility.lifetime_total, policy),
    )


def progress_percentage(lifetime_total: int, policy: PaymentPolicy) -> int:
    """Whole-number percent of the lifetime cap, with halves rounded up."""
    share = Decimal(lifetime_total) * 100 / Decimal(policy.lifetime_cap)
    return int(share.quantize(Decimal(1), rounding=ROUND_HALF_UP))
