"""Patient bills built from a list of appointments."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .entities import Patient, Schedule

_BEGIN = "_" * 80 + "\n"
_DIVIDER = "|" + "=" * 79 + "\n"
_END = "|" + "_" * 79 + "\n"


def calculate_total(costs: Iterable[float]) -> float:
    """Sum of all costs."""
    return float(sum(costs, 0.0))


@dataclass
class Bill:
    """A patient's procedures and what each one costs."""

    patient: Patient = field(default_factory=Patient)
    procedures: list[str] = field(default_factory=list)
    costs: list[float] = field(default_factory=list)

    @classmethod
    def from_schedules(cls, schedules: Iterable[Schedule]) -> "Bill":
        """Bill the patient of the first appointment for every appointment given."""
        bill = cls()
        for index, schedule in enumerate(schedules):
            if index == 0:
                bill.patient = schedule.patient
            bill.procedures.append(schedule.procedure.name)
            bill.costs.append(schedule.procedure.cost)
        return bill

    def total(self) -> float:
        """Total balance owed."""
        return calculate_total(self.costs)

    def render(self) -> str:
        """The bill as printable text."""
        p = self.patient
        lines = [
            _BEGIN,
            f"{'| Patient Information':<40}| Patient Health Insurance\n",
            f"{'|':<40}|\n",
            f"{'| ' + p.first_name + ' ' + p.last_name:<40}| {p.insurance_provider}\n",
            f"| {p.date_of_birth:<38}|\n",
            f"{'|':<40}|\n",
            _DIVIDER,
            f"{'| Procedure':<35}| Amount\n",
            f"{'|':<35}|\n",
        ]
        lines.extend(
            f"| {name:<33}| {cost:.2f}\n" for name, cost in zip(self.procedures, self.costs)
        )
        lines.extend(
            [
                f"{'|':<35}|\n",
                _DIVIDER,
                f"|  Total Balance : ${self.total():.2f}\n",
                _END,
            ]
        )
        return "".join(lines)