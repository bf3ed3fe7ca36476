"""Payment-related Pydantic schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class IssuePaymentRequestSchema(BaseModel):
    """Schema for POST /v1/payments request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "participant_id": "550e8400-e29b-41d4-a716-446655440000",
                    "notes": "Beach cleanup, 6 bags",
                }
            ]
        }
    )
    participant_id: str = Field(
        "",
        max_length=36,
        description="Participant receiving the payment",
    )
    shift_id: Optional[str] = Field(
        None,
        max_length=36,
        description="Shift the payment is for, if any",
    )
    notes: Optional[str] = Field(
        None,
        max_length=2000,
        description="Free-text note",
    )

    @field_validator("participant_id")
    @classmethod
    def strip_participant_id(cls, v: str) -> str:
        return v.strip()


class PaymentSchema(BaseModel):
    """A gift-card payment."""

    payment_id: str
    participant_id: str
    participant_name: Optional[str] = None
    amount: int = Field(..., gt=0, examples=[80])
    issued_at: str = Field(..., description="ISO 8601 timestamp (UTC)")
    issued_by_id: str
    issued_by_name: Optional[str] = None
    shift_id: Optional[str] = None
    notes: Optional[str] = None


class IssuePaymentResponseSchema(BaseModel):
    """Schema for POST /v1/payments response body."""

    payment: PaymentSchema
    message: str = Field(..., examples=["$80 payment issued successfully"])
    remaining_payments: int = Field(
        ...,
        ge=0,
        description="Payments still available to the participant after this one",
    )


class PaymentStatusSchema(BaseModel):
    """Schema for GET /v1/payments/check response body."""

    allowed: bool
    reason: Optional[str] = Field(
        None,
        description="Why issuance is blocked (only when not allowed)",
    )
    lifetime_total: int = Field(..., ge=0)
    payments_count: int = Field(..., ge=0)
    payments_remaining: int = Field(..., ge=0)
    paid_this_week: bool
    reached_lifetime_cap: bool
    max_payments: int
    payment_amount: int
    lifetime_cap: int
    progress_percentage: int = Field(..., ge=0)

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "allowed": True,
                    "reason": None,
                    "lifetime_total": 1920,
                    "payments_count": 24,
                    "payments_remaining": 1,
                    "paid_this_week": False,
                    "reached_lifetime_cap": False,
                    "max_payments": 25,
                    "payment_amount": 80,
                    "lifetime_cap": 2000,
                    "progress_percentage": 96,
                }
            ]
        }
    )
