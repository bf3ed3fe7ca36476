"""
Payment Policy for the Cash for Trash gift-card program.

The policy holds the program's fixed payment constants. It is an
immutable value handed to the eligibility rules and the payment service
at construction, so tests can build variants without touching process
state.

Usage:
    from casework.service.eligibility.policy import DEFAULT_POLICY

    DEFAULT_POLICY.max_payments  # 25

    # Or build a variant for testing
    small = PaymentPolicy(payment_amount=50, lifetime_cap=100)
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PaymentPolicy(BaseModel):
    """
    Flat per-payment amount and lifetime cap, in whole currency units.
    """

    model_config = ConfigDict(frozen=True)

    payment_amount: int = Field(
        default=80,
        gt=0,
        description="Amount of every gift-card payment",
    )
    lifetime_cap: int = Field(
        default=2000,
        gt=0,
        description="Maximum cumulative amount a participant may ever receive",
    )

    @model_validator(mode="after")
    def validate_cap_fits_payments(self) -> "PaymentPolicy":
        if self.lifetime_cap < self.payment_amount:
            raise ValueError(
                f"lifetime_cap ({self.lifetime_cap}) is below "
                f"payment_amount ({self.payment_amount})"
            )
        # Otherwise the last allowed payment could overshoot the cap
        if self.lifetime_cap % self.payment_amount:
            raise ValueError(
                f"lifetime_cap ({self.lifetime_cap}) must be a multiple of "
                f"payment_amount ({self.payment_amount})"
            )
        return self

    @property
    def max_payments(self) -> int:
        """Number of full payments that fit under the lifetime cap."""
        return self.lifetime_cap // self.payment_amount


DEFAULT_POLICY = PaymentPolicy()
