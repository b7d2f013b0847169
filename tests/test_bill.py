from datetime import datetime

import pytest

from wardsys.bill import Bill, calculate_total
from wardsys.entities import Patient, Procedure, Schedule


def schedule(patient, name, cost):
    return Schedule(datetime(2024, 1, 1, 9, 0), patient=patient, procedure=Procedure(name, cost))


@pytest.fixture
def patient():
    return Patient(login="jdoe", first_name="Jane", last_name="Doe",
                   date_of_birth=19900102, insurance_provider="Acme")


def test_calculate_total_empty():
    assert calculate_total([]) == 0.0


def test_calculate_total_matches_sum():
    costs = [10.25, 3.5, 100.0]
    assert calculate_total(costs) == pytest.approx(sum(costs))


def test_from_schedules_collects_in_order(patient):
    other = Patient(first_name="Other")
    bill = Bill.from_schedules([
        schedule(patient, "X-Ray", 120.0),
        schedule(other, "MRI", 900.5),
    ])
    assert bill.patient == patient
    assert bill.procedures == ["X-Ray", "MRI"]
    assert bill.costs == [120.0, 900.5]
    assert bill.total() == pytest.approx(1020.5)


def test_from_empty_schedules():
    bill = Bill.from_schedules([])
    assert bill.procedures == []
    assert bill.patient == Patient()
    assert bill.total() == 0.0


def test_render_contains_rows_and_total(patient):
    bill = Bill.from_schedules([schedule(patient, "X-Ray", 120.0)])
    text = bill.render()
    assert "| X-Ray" in text
    assert "| 120.00\n" in text
    assert "|  Total Balance : $120.00\n" in text
    assert "| Acme\n" in text
    assert "| Jane Doe" in text


def test_render_column_alignment(patient):
    bill = Bill.from_schedules([schedule(patient, "MRI", 5.0)])
    row = next(line for line in bill.render().splitlines() if line.startswith("| MRI"))
    assert row.index("|", 1) == 35
    name_line = next(line for line in bill.render().splitlines() if "Jane Doe" in line)
    assert name_line.index("|", 1) == 40


def test_render_frames(patient):
    lines = Bill.from_schedules([schedule(patient, "MRI", 5.0)]).render().splitlines()
    assert set(lines[0]) == {"_"}
    assert lines[-1].startswith("|") and set(lines[-1][1:]) == {"_"}
    assert len(lines[0]) == len(lines[-1])