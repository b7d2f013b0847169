"""Procedures kept in a comma separated text file."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

from .entities import InventoryItem, Procedure, format_items


class ProcedureExistsError(ValueError):
    """Raised when adding a procedure whose name is already stored."""


class ProcedureNotFoundError(LookupError):
    """Raised when a named procedure is not in the store."""


def serialize_items(items: Iterable[InventoryItem]) -> str:
    """Encode items as ``name-count-threshold`` joined by semicolons."""
    return format_items(items)


def deserialize_items(text: str) -> list[InventoryItem]:
    """Decode the output of :func:`serialize_items`."""
    entries = text.split(";")
    if entries and entries[-1] == "":
        entries.pop()
    items = []
    for entry in entries:
        parts = entry.split("-")
        if len(parts) < 3:
            raise ValueError(f"malformed item entry: {entry!r}")
        items.append(InventoryItem(parts[0], int(parts[1]), int(parts[2])))
    return items


class ProcedureStore:
    """Procedures stored one per line as ``name,cost,items``."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _records(self) -> Iterator[list[str]]:
        try:
            handle = self.path.open(encoding="utf-8")
        except FileNotFoundError:
            return
        with handle:
            for line in handle:
                line = line.rstrip("\r\n")
                if line:
                    yield line.split(",")

    def contains(self, name: str) -> bool:
        """Whether a procedure called ``name`` is stored."""
        return any(fields[0] == name for fields in self._records())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains(name)

    def add(self, procedure: Procedure) -> None:
        """Append ``procedure``; raises ProcedureExistsError if its name is taken."""
        if self.contains(procedure.name):
            raise ProcedureExistsError(f"procedure already exists: {procedure.name}")
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(
                f"{procedure.name},{procedure.cost:g},{serialize_items(procedure.items_used)}\n"
            )

    def get(self, name: str) -> Procedure:
        """Return the stored procedure called ``name``."""
        for fields in self._records():
            if fields[0] == name:
                if len(fields) < 2:
                    raise ValueError(f"malformed procedure record: {','.join(fields)!r}")
                items = deserialize_items(fields[2]) if len(fields) > 2 else []
                return Procedure(name, float(fields[1]), items)
        raise ProcedureNotFoundError(f"procedure not found: {name}")