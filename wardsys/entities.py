"""Core records of the hospital system: people, rooms, supplies and appointments."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Iterable


class Clearance(IntEnum):
    """Staff clearance levels, from lowest to highest."""

    ENTRY = 0
    JANITORIAL = 1
    NURSING = 2
    MEDICAL = 3
    ADMIN = 4


@dataclass
class Room:
    """A hospital room and whether it can currently be booked."""

    number: int = 0
    floor: int = 0
    available: bool = True


@dataclass
class User:
    """An account holder. Dates are stored as YYYYMMDD integers."""

    login: str = ""
    password: str = ""
    last_name: str = ""
    first_name: str = ""
    date_of_birth: int = 19000101
    gender: str = "X"

    def _user_fields(self) -> dict:
        return {
            "login": self.login,
            "password": self.password,
            "last_name": self.last_name,
            "first_name": self.first_name,
            "date_of_birth": self.date_of_birth,
            "gender": self.gender,
        }


@dataclass
class Patient(User):
    """A patient account, with insurance and room assignment."""

    has_insurance: bool = False
    insurance_provider: str = "N/A"
    has_room: bool = False
    room: Room = field(default_factory=Room)

    @classmethod
    def from_user(cls, user: User) -> "Patient":
        """Build a patient from a plain user, with patient defaults."""
        return cls(**user._user_fields())


@dataclass
class Staff(User):
    """A staff account."""

    id_number: int = 0
    clearance_level: int = Clearance.ENTRY
    job_title: str = ""
    date_of_hire: int = 19000101

    @classmethod
    def from_user(cls, user: User) -> "Staff":
        """Build a staff member from a plain user, with staff defaults."""
        return cls(**user._user_fields(), date_of_hire=19010101)


@dataclass
class InventoryItem:
    """A stocked supply with its current count and reorder threshold."""

    name: str = ""
    count: int = 0
    threshold: int = 0

    def __str__(self) -> str:
        return f"{self.name}-{self.count}-{self.threshold}"


def format_items(items: Iterable[InventoryItem]) -> str:
    """Join items as ``name-count-threshold`` separated by semicolons."""
    return ";".join(str(item) for item in items)


@dataclass
class Procedure:
    """A medical procedure, its cost and the supplies it consumes."""

    name: str = ""
    cost: float = 0.0
    items_used: list[InventoryItem] = field(default_factory=list)


@dataclass
class Schedule:
    """An appointment tying a time, staffer, patient, room and procedure."""

    time: datetime = field(default_factory=datetime.now)
    staffer: Staff = field(default_factory=Staff)
    patient: Patient = field(default_factory=Patient)
    room: Room = field(default_factory=Room)
    procedure: Procedure = field(default_factory=Procedure)