"""Destination outcome entity - housing and employment progress."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional
from uuid import uuid4


class HousingStatus(str, Enum):
    STREET = "STREET"
    SHELTER = "SHELTER"
    TRANSITIONAL = "TRANSITIONAL"
    SRO = "SRO"  # Single room occupancy
    SOBER_LIVING = "SOBER_LIVING"
    ILF = "ILF"  # Independent living facility
    PERMANENT = "PERMANENT"
    OTHER = "OTHER"


class EmploymentStatus(str, Enum):
    NONE = "NONE"
    TRAINING = "TRAINING"
    PART_TIME = "PART_TIME"
    FULL_TIME = "FULL_TIME"


class Benefit(str, Enum):
    SNAP = "SNAP"
    MEDI_CAL = "MEDI_CAL"
    SSI = "SSI"
    SSDI = "SSDI"
    GENERAL_RELIEF = "GENERAL_RELIEF"
    VETERANS_BENEFITS = "VETERANS_BENEFITS"
    UNEMPLOYMENT = "UNEMPLOYMENT"


class DocumentType(str, Enum):
    ID = "ID"
    BIRTH_CERT = "BIRTH_CERT"
    SSN_CARD = "SSN_CARD"
    PASSPORT = "PASSPORT"
    BANK_ACCOUNT = "BANK_ACCOUNT"
    PHONE = "PHONE"


@dataclass
class DestinationOutcome:
    """
    A point-in-time snapshot of where a participant stands.

    Outcomes are appended over time; the newest one reflects the
    participant's current situation.
    """

    participant_id: str
    housing_status: HousingStatus = HousingStatus.STREET
    employment_status: EmploymentStatus = EmploymentStatus.NONE
    other_housing_details: Optional[str] = None
    benefits: List[Benefit] = field(default_factory=list)
    documents_obtained: List[DocumentType] = field(default_factory=list)
    notes: Optional[str] = None
    recorded_by_id: Optional[str] = None
    id: str = field(default_factory=lambda: str(uuid4()))
    recorded_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    participant_name: Optional[str] = None
    recorded_by_name: Optional[str] = None
