"""Room booking and availability reports."""

from __future__ import annotations

import sys
from typing import Mapping, TextIO

from .entities import Room


def book_room(rooms: Mapping[int, Room], number: int) -> None:
    """Mark room ``number`` as taken. Raises KeyError for an unknown room."""
    rooms[number].available = False


def return_room(rooms: Mapping[int, Room], number: int) -> None:
    """Mark room ``number`` as free again. Raises KeyError for an unknown room."""
    rooms[number].available = True


def room_report(rooms: Mapping[int, Room]) -> str:
    """One line per room, in order of the map's keys."""
    lines = []
    for key in sorted(rooms):
        room = rooms[key]
        status = "Available" if room.available else "Unavailable"
        lines.append(f"Room: {room.number} Floor: {room.floor} Availability: {status}\n")
    return "".join(lines)


def display_room_report(rooms: Mapping[int, Room], out: TextIO | None = None) -> None:
    """Write the availability report to ``out`` (standard output by default)."""
    out = out if out is not None else sys.stdout
    out.write("Room Availability Report:\n")
    out.write(room_report(rooms) + "\n")