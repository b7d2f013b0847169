import io
from datetime import datetime

from wardsys.entities import Patient, Procedure, Room, Staff
from wardsys.schedules import add_event, display_schedule_report, schedule_report

SEP = "************************\n"


def _event(schedules):
    return add_event(
        schedules,
        datetime(2024, 3, 5, 14, 7, 9),
        Staff(last_name="House", first_name="Greg"),
        Patient(last_name="Doe", first_name="Jane"),
        Room(312, 3, False),
        Procedure("X-Ray", 150.0),
    )


def test_add_event_appends_in_order():
    schedules = []
    first = _event(schedules)
    second = _event(schedules)
    assert schedules == [first, second]
    assert first.room.number == 312
    assert first.procedure.name == "X-Ray"


def test_empty_report_is_separator():
    assert schedule_report([]) == SEP


def test_report_block():
    schedules = []
    _event(schedules)
    assert schedule_report(schedules) == (
        SEP
        + "Date & Time: 03-05-2024 14:07:09\n"
        + "Patient: Doe, Jane\n"
        + "Staff: House, Greg\n"
        + "Room: 312\n"
        + "Procedure: X-Ray\n"
        + SEP
    )


def test_report_has_separator_per_event():
    schedules = []
    for _ in range(3):
        _event(schedules)
    assert schedule_report(schedules).count(SEP) == 4


def test_display_writes_header():
    schedules = []
    _event(schedules)
    out = io.StringIO()
    display_schedule_report(schedules, out)
    assert out.getvalue() == "Schedule Report:\n" + schedule_report(schedules) + "\n"