"""Gift-card payment API endpoints."""

from dataclasses import asdict
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from casework.application.dto import IssuePaymentRequest
from casework.application.services import PaymentService
from casework.core.dependencies import get_payment_service, require_current_user
from casework.core.metrics import (
    record_eligibility_check,
    record_payment_issued,
    track_issuance_latency,
)
from casework.domain.entities import StaffUser
from casework.presentation.schemas import (
    ErrorResponseSchema,
    IssuePaymentRequestSchema,
    IssuePaymentResponseSchema,
    PaymentRejectedSchema,
    PaymentSchema,
    PaymentStatusSchema,
)

payment_router = APIRouter(prefix="/payments")


@payment_router.get(
    "",
    response_model=list[PaymentSchema],
    summary="List Payments",
    description="List gift-card payments, newest first.",
)
async def list_payments(
    payment_service: Annotated[PaymentService, Depends(get_payment_service)],
    participant_id: Annotated[
        Optional[str],
        Query(max_length=36, description="Only payments for this participant"),
    ] = None,
) -> list[PaymentSchema]:
    payments = await payment_service.list_payments(participant_id)
    return [PaymentSchema(**asdict(p)) for p in payments]


@payment_router.get(
    "/check",
    response_model=PaymentStatusSchema,
    summary="Check Payment Eligibility",
    description="""
    Report whether a payment can be issued to a participant right now,
    with their lifetime total, remaining payments and progress toward
    the lifetime cap. Read-only.
    """,
)
async def check_payment_status(
    participant_id: Annotated[
        str,
        Query(min_length=1, max_length=36, description="Participant to check"),
    ],
    payment_service: Annotated[PaymentService, Depends(get_payment_service)],
) -> PaymentStatusSchema:
    status = await payment_service.get_payment_status(participant_id)

    record_eligibility_check(status.allowed)

    return PaymentStatusSchema(**status.to_dict())


@payment_router.post(
    "",
    response_model=IssuePaymentResponseSchema,
    status_code=201,
    summary="Issue Payment",
    description="""
    Issue one flat-amount gift-card payment.

    Rejected with 400 when the participant already received a payment
    this Sunday-Saturday week or has reached the lifetime cap.
    """,
    responses={
        201: {"description": "Payment issued"},
        400: {"model": PaymentRejectedSchema, "description": "Payment not allowed"},
        401: {"model": ErrorResponseSchema, "description": "Missing caller identity"},
        404: {"model": ErrorResponseSchema, "description": "Participant not found"},
    },
)
async def issue_payment(
    request: IssuePaymentRequestSchema,
    user: Annotated[StaffUser, Depends(require_current_user)],
    payment_service: Annotated[PaymentService, Depends(get_payment_service)],
) -> IssuePaymentResponseSchema:
    dto = IssuePaymentRequest(
        participant_id=request.participant_id,
        issued_by_id=user.id,
        shift_id=request.shift_id,
        notes=request.notes,
    )

    with track_issuance_latency():
        response = await payment_service.issue_payment(dto)

    record_payment_issued(response.payment.amount)

    return IssuePaymentResponseSchema(
        payment=PaymentSchema(**asdict(response.payment)),
        message=response.message,
        remaining_payments=response.remaining_payments,
    )
