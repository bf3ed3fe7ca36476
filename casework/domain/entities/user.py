"""Staff user entity supplied by the identity collaborator."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class UserRole(str, Enum):
    """Role of a staff member."""

    ADMIN = "ADMIN"
    STAFF = "STAFF"


@dataclass(frozen=True)
class StaffUser:
    """
    An authenticated staff member.

    Identity is established upstream; the service trusts it as given.
    """

    id: str
    role: UserRole = UserRole.STAFF
    name: Optional[str] = None
    email: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
