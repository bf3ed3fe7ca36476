from fastapi import APIRouter

from .homework import homework_router
from .outcome import outcome_router
from .participant import participant_router
from .payment import payment_router
from .shift import shift_router

router = APIRouter()

router.include_router(participant_router, tags=["Participants"])
router.include_router(payment_router, tags=["Payments"])
router.include_router(shift_router, tags=["Shifts"])
router.include_router(homework_router, tags=["Homework"])
router.include_router(outcome_router, tags=["Outcomes"])
