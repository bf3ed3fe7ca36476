"""Database infrastructure."""

from .connection import (
    DatabaseSessionManager,
    db_manager,
    get_db_session,
    ping,
    to_async_url,
)
from .models import (
    Base,
    DestinationOutcomeModel,
    GiftCardPaymentModel,
    HomeworkAssignmentModel,
    ParticipantModel,
    ShiftModel,
    UserModel,
    ensure_utc,
)

__all__ = [
    "DatabaseSessionManager",
    "db_manager",
    "get_db_session",
    "ping",
    "to_async_url",
    "Base",
    "DestinationOutcomeModel",
    "GiftCardPaymentModel",
    "HomeworkAssignmentModel",
    "ParticipantModel",
    "ShiftModel",
    "UserModel",
    "ensure_utc",
]
