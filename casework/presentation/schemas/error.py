"""Pydantic schema for API error responses."""

from pydantic import BaseModel, Field


class ErrorResponseSchema(BaseModel):
    """Standard error response format for all API errors."""
    error: str = Field(
        ...,
        description="Error code",
        examples=["PARTICIPANT_NOT_FOUND"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Participant not found: 550e8400-e29b-41d4-a716-446655440000"],
    )
    request_id: str | None = Field(
        None,
        description="Request ID for tracing",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error": "PARTICIPANT_NOT_FOUND",
                    "message": "Participant not found: 550e8400-e29b-41d4-a716-446655440000",
                    "request_id": "abc123",
                }
            ]
        }
    }


class EligibilityDetailSchema(BaseModel):
    """Participant standing attached to a payment rejection."""

    lifetime_total: int
    payments_remaining: int
    paid_this_week: bool
    reached_lifetime_cap: bool


class PaymentRejectedSchema(ErrorResponseSchema):
    """Error response for a payment blocked by the weekly or lifetime cap."""

    validation: EligibilityDetailSchema

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error": "PAYMENT_NOT_ALLOWED",
                    "message": (
                        "Participant has already received a payment this week. "
                        "Next payment available next Sunday."
                    ),
                    "request_id": "abc123",
                    "validation": {
                        "lifetime_total": 80,
                        "payments_remaining": 24,
                        "paid_this_week": True,
                        "reached_lifetime_cap": False,
                    },
                }
            ]
        }
    }


class DeletedResponseSchema(BaseModel):
    success: bool = True
