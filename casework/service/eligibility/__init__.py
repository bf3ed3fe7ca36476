"""
Payment Eligibility Module for the Cash for Trash program
"""

from .models import EligibilityResult, PaymentSnapshot, PaymentStatus
from .policy import DEFAULT_POLICY, PaymentPolicy
from .rules import (
    ALREADY_PAID_THIS_WEEK,
    build_payment_status,
    calculate_lifetime_total,
    calculate_payments_remaining,
    evaluate_eligibility,
    lifetime_limit_reason,
    paid_within_week,
    progress_percentage,
)
from .week import (
    get_end_of_week,
    get_start_of_week,
    get_week_bounds,
    host_timezone,
    is_within_week,
    resolve_timezone,
)

__all__ = [
    # Policy
    "PaymentPolicy",
    "DEFAULT_POLICY",
    # Models
    "EligibilityResult",
    "PaymentSnapshot",
    "PaymentStatus",
    # Rules
    "ALREADY_PAID_THIS_WEEK",
    "build_payment_status",
    "calculate_lifetime_total",
    "calculate_payments_remaining",
    "evaluate_eligibility",
    "lifetime_limit_reason",
    "paid_within_week",
    "progress_percentage",
    # Week
    "get_end_of_week",
    "get_start_of_week",
    "get_week_bounds",
    "host_timezone",
    "is_within_week",
    "resolve_timezone",
]
