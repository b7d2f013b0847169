"""Hospital records: people, rooms, schedules, stored procedures and inventory, bills and profiles."""

__version__ = "0.1.0"