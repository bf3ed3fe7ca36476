"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException, InvalidRequestException, UnauthorizedException
from .participant import ParticipantNotFoundException
from .payment import PaymentNotAllowedException
from .shift import AlreadyClockedInException, ShiftNotFoundException
from .homework import HomeworkNotFoundException

__all__ = [
    "DomainException",
    "InvalidRequestException",
    "UnauthorizedException",
    "ParticipantNotFoundException",
    "PaymentNotAllowedException",
    "AlreadyClockedInException",
    "ShiftNotFoundException",
    "HomeworkNotFoundException",
]
