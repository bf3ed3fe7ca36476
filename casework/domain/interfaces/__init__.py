"""
Domain Interfaces (Ports)
"""

from .repositories import (
    HomeworkRepository,
    OutcomeRepository,
    ParticipantRepository,
    PaymentRepository,
    ShiftRepository,
)

__all__ = [
    "HomeworkRepository",
    "OutcomeRepository",
    "ParticipantRepository",
    "PaymentRepository",
    "ShiftRepository",
]
