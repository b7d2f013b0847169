"""Inventory records kept in a comma separated text file."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

from .entities import InventoryItem


class ItemExistsError(ValueError):
    """Raised when adding an item whose name is already stored."""


class ItemNotFoundError(LookupError):
    """Raised when a named item is not in the store."""


class InventoryStore:
    """Supplies stored one per line as ``name,count,threshold``."""

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

    @staticmethod
    def _parse(fields: list[str]) -> InventoryItem:
        if len(fields) < 3:
            raise ValueError(f"malformed inventory record: {','.join(fields)!r}")
        return InventoryItem(fields[0], int(fields[1]), int(fields[2]))

    @staticmethod
    def _format(item: InventoryItem) -> str:
        return f"{item.name},{item.count},{item.threshold}\n"

    def contains(self, name: str) -> bool:
        """Whether an item called ``name`` is stored."""
        return any(fields[0] == name for fields in self._records())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains(name)

    def add(self, item: InventoryItem) -> None:
        """Append ``item``; raises ItemExistsError if its name is taken."""
        if self.contains(item.name):
            raise ItemExistsError(f"item already exists: {item.name}")
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(self._format(item))

    def get(self, name: str) -> InventoryItem:
        """Return the stored item called ``name``."""
        for fields in self._records():
            if fields[0] == name:
                return self._parse(fields)
        raise ItemNotFoundError(f"inventory item not found: {name}")

    def items(self) -> list[InventoryItem]:
        """All stored items in file order; empty if the file does not exist."""
        return [self._parse(fields) for fields in self._records()]

    def save_all(self, items: Iterable[InventoryItem]) -> None:
        """Replace the whole file with ``items``."""
        with self.path.open("w", encoding="utf-8") as handle:
            handle.writelines(self._format(item) for item in items)

    def add_item(self, name: str, count: int, threshold: int) -> InventoryItem:
        """Create and store a new item, returning it."""
        item = InventoryItem(name, count, threshold)
        self.add(item)
        return item

    def _update(self, name: str, **changes: int) -> int:
        items = self.items()
        matched = 0
        for item in items:
            if item.name == name:
                for attribute, value in changes.items():
                    setattr(item, attribute, value)
                matched += 1
        self.save_all(items)
        return matched

    def modify_count(self, name: str, count: int) -> int:
        """Set the count of every item called ``name``; returns how many changed."""
        return self._update(name, count=count)

    def modify_threshold(self, name: str, threshold: int) -> int:
        """Set the threshold of every item called ``name``; returns how many changed."""
        return self._update(name, threshold=threshold)

    def modify_both(self, name: str, count: int, threshold: int) -> int:
        """Set count and threshold of every item called ``name``; returns how many changed."""
        return self._update(name, count=count, threshold=threshold)

    def listing(self) -> str:
        """Printable list of items: name, count and threshold separated by tabs."""
        return "".join(
            f"{item.name}\t\t{item.count}\t\t{item.threshold}\n\n" for item in self.items()
        )