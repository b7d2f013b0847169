"""Patient profile built from a list of appointments."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .entities import Patient, Schedule

_BEGIN = "_" * 80 + "\n"
_DIVIDER = "|" + "=" * 79 + "\n"
_END = "|" + "_" * 79 + "\n"


@dataclass
class PatientProfile:
    """A patient with the procedures, rooms and staff of their appointments."""

    patient: Patient = field(default_factory=Patient)
    procedures: list[str] = field(default_factory=list)
    rooms: list[int] = field(default_factory=list)
    floors: list[int] = field(default_factory=list)
    staff: list[str] = field(default_factory=list)

    @classmethod
    def from_schedules(cls, schedules: Iterable[Schedule]) -> "PatientProfile":
        """Profile the patient of the first appointment across every appointment given."""
        profile = cls()
        for index, schedule in enumerate(schedules):
            if index == 0:
                profile.patient = schedule.patient
            profile.procedures.append(schedule.procedure.name)
            profile.rooms.append(schedule.room.number)
            profile.floors.append(schedule.room.floor)
            profile.staff.append(schedule.staffer.last_name)
        return profile

    def render(self) -> str:
        """The profile as printable text."""
        p = self.patient
        name = f"{p.first_name} {p.last_name}"
        lines = [
            _BEGIN,
            f"{'| Patient Information':<42}| Patient Health Insurance\n",
            f"{'|':<42}|\n",
            f"| Patient Name : {name:<25}| {p.insurance_provider}\n",
            f"{'| Patient DOB : ':<17}{p.date_of_birth:<25}|\n",
            f"{'| Gender : ':<15}{p.gender:<27}|\n",
            f"{'|':<42}|\n",
            _DIVIDER,
            "|\n",
            f"{'| Procedure':<25}{'Floor':<15}{'Room Number':<20}Assigned Staff\n",
            "|\n",
        ]
        lines.extend(
            f"{'| ' + procedure:<25}{floor:<15}{room:<20}{staffer}\n"
            for procedure, floor, room, staffer in zip(
                self.procedures, self.floors, self.rooms, self.staff
            )
        )
        lines.append("|\n")
        lines.append(_END)
        return "".join(lines)