"""Appointment lists and their printed report."""

from __future__ import annotations

import sys
from datetime import datetime
from typing import Iterable, MutableSequence, TextIO

from .entities import Patient, Procedure, Room, Schedule, Staff

_SEPARATOR = "************************\n"


def add_event(
    schedules: MutableSequence[Schedule],
    time: datetime,
    staffer: Staff,
    patient: Patient,
    room: Room,
    procedure: Procedure,
) -> Schedule:
    """Append a new appointment to ``schedules`` and return it."""
    event = Schedule(time, staffer, patient, room, procedure)
    schedules.append(event)
    return event


def _local(time: datetime) -> datetime:
    return time.astimezone() if time.tzinfo is not None else time


def schedule_report(schedules: Iterable[Schedule]) -> str:
    """Format appointments as blocks separated by asterisk lines."""
    parts = [_SEPARATOR]
    for s in schedules:
        stamp = _local(s.time).strftime("%m-%d-%Y %H:%M:%S")
        parts.append(
            f"Date & Time: {stamp}\n"
            f"Patient: {s.patient.last_name}, {s.patient.first_name}\n"
            f"Staff: {s.staffer.last_name}, {s.staffer.first_name}\n"
            f"Room: {s.room.number}\n"
            f"Procedure: {s.procedure.name}\n"
            f"{_SEPARATOR}"
        )
    return "".join(parts)


def display_schedule_report(schedules: Iterable[Schedule], out: TextIO | None = None) -> None:
    """Write the schedule report to ``out`` (standard output by default)."""
    out = out if out is not None else sys.stdout
    out.write("Schedule Report:\n")
    out.write(schedule_report(schedules) + "\n")