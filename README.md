# wardsys

A small library of hospital records. It covers patients, staff, rooms, appointments,
procedures and inventory. It also stores procedures and inventory in plain-text files, and
formats reports, bills and patient profiles as printable text.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `wardsys.entities`

This module holds the record types. Each one is a dataclass.

- `User` has these fields:
  - `login`
  - `password`
  - `last_name`
  - `first_name`
  - `date_of_birth`, a `YYYYMMDD` integer
  - `gender`
- `Patient` is a `User` with `has_insurance`, `insurance_provider` (default `"N/A"`), `has_room` and `room`.
- `Staff` is a `User` with `id_number`, `clearance_level`, `job_title` and `date_of_hire`.
- `Clearance` is an integer enum: `ENTRY`, `JANITORIAL`, `NURSING`, `MEDICAL`, `ADMIN`.
- `Patient.from_user(user)` and `Staff.from_user(user)` copy a plain user's fields and fill in the defaults for the new type.
- `Room` has `number`, `floor` and `available`.
- `InventoryItem` has `name`, `count` and `threshold`. `str(item)` gives `name-count-threshold`.
- `format_items(items)` joins several items with `;`.
- `Procedure` has `name`, `cost` and `items_used`.
- `Schedule` is an appointment with these fields:
  - `time`, which defaults to now
  - `staffer`
  - `patient`
  - `room`
  - `procedure`

### `wardsys.rooms`

These functions work on a mapping from room number to `Room`:

- `book_room(rooms, number)` marks a room unavailable.
- `return_room(rooms, number)` marks a room available again.

Both raise `KeyError` for an unknown room.

`room_report(rooms)` returns one line per room, in order of room number. Each line reads `Room: N Floor: F Availability: Available|Unavailable`.

`display_room_report(rooms, out=None)` writes the report under a title line. It writes to `out`, or to standard output if `out` is not given.

```python
from wardsys.entities import Room
from wardsys.rooms import book_room, room_report

rooms = {101: Room(101, 1, True), 102: Room(102, 1, True)}
book_room(rooms, 101)
print(room_report(rooms))
```

### `wardsys.schedules`

`add_event(schedules, time, staffer, patient, room, procedure)` appends a new `Schedule` to a list and returns it.

`schedule_report(schedules)` formats each appointment as a block. A block holds the date and time (`MM-DD-YYYY HH:MM:SS`), the patient, the staff member, the room and the procedure. The blocks are separated by lines of asterisks.

`display_schedule_report(schedules, out=None)` writes the report under a title line.

### `wardsys.inventory_store`

`InventoryStore(path)` keeps items in a text file, one `name,count,threshold` line each. A file that does not exist reads as empty. Its methods are:

- `contains(name)`, or the `in` operator, tells whether an item is stored.
- `add(item)` appends an item. It raises `ItemExistsError` if the name is already stored.
- `add_item(name, count, threshold)` builds an item, stores it and returns it.
- `get(name)` returns the stored item. It raises `ItemNotFoundError` if there is none.
- `items()` returns all items in file order.
- `save_all(items)` rewrites the whole file.
- `modify_count(name, count)`, `modify_threshold(name, threshold)` and `modify_both(name, count, threshold)` update every item with that name, rewrite the file and return how many items changed.
- `listing()` returns a printable list of the items.

### `wardsys.procedure_store`

`ProcedureStore(path)` keeps procedures one per line, as `name,cost,items`. Its methods are `contains(name)` (or `in`), `add(procedure)` and `get(name)`.

- `add` raises `ProcedureExistsError` if the name is already stored.
- `get` raises `ProcedureNotFoundError` if there is none.

`serialize_items(items)` encodes the supplies a procedure uses, and `deserialize_items(text)` decodes them. The encoding is `name-count-threshold;...`.

### `wardsys.bill`

`calculate_total(costs)` sums a list of costs.

`Bill.from_schedules(schedules)` bills the patient of the first appointment. It takes the procedure and cost of every appointment given.

`bill.total()` returns the balance owed, and `bill.render()` returns the bill as a text table.

### `wardsys.profile`

`PatientProfile.from_schedules(schedules)` collects the patient's details. For each appointment it takes the procedure, the floor, the room and the staff member's last name.

`profile.render()` returns the profile as a text table.

## What it does not do

The package is a library only:

- It installs no command.
- It has no interactive menus, neither the login and account screens nor the patient, staff and inventory screens.
- It does not store or check user accounts or passwords.
- It does not place inventory orders.
- It has no queue of procedures.
- It does not check patients into rooms.

The storage classes take whatever file path they are given. They do not choose a data directory.