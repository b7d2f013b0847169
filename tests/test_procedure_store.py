import pytest

from wardsys.entities import InventoryItem, Procedure
from wardsys.procedure_store import (
    ProcedureExistsError,
    ProcedureNotFoundError,
    ProcedureStore,
    deserialize_items,
    serialize_items,
)


@pytest.fixture
def store(tmp_path):
    return ProcedureStore(tmp_path / "procedures.txt")


def test_serialize_format():
    items = [InventoryItem("gauze", 2, 1), InventoryItem("tape", 4, 3)]
    assert serialize_items(items) == "gauze-2-1;tape-4-3"


def test_serialize_empty():
    assert serialize_items([]) == ""


def test_deserialize_empty():
    assert deserialize_items("") == []


def test_serialize_round_trip():
    items = [InventoryItem("gauze", 2, 1), InventoryItem("tape", 4, 3)]
    assert deserialize_items(serialize_items(items)) == items


def test_deserialize_ignores_trailing_separator():
    assert deserialize_items("gauze-2-1;") == [InventoryItem("gauze", 2, 1)]


def test_deserialize_malformed_raises():
    with pytest.raises(ValueError):
        deserialize_items("gauze-2")


def test_add_writes_line(store):
    store.add(Procedure("xray", 150.5, [InventoryItem("film", 1, 0)]))
    assert store.path.read_text(encoding="utf-8") == "xray,150.5,film-1-0\n"


def test_add_get_round_trip(store):
    procedure = Procedure("cast", 80.25, [InventoryItem("plaster", 3, 1), InventoryItem("gauze", 2, 1)])
    store.add(procedure)
    assert store.get("cast") == procedure
    assert store.contains("cast")
    assert "cast" in store


def test_procedure_without_items_round_trip(store):
    store.add(Procedure("checkup", 40.0))
    assert store.get("checkup") == Procedure("checkup", 40.0, [])


def test_add_duplicate_raises(store):
    store.add(Procedure("xray", 10.0))
    with pytest.raises(ProcedureExistsError):
        store.add(Procedure("xray", 20.0))
    assert store.get("xray").cost == 10.0


def test_get_missing_raises(store):
    with pytest.raises(ProcedureNotFoundError):
        store.get("surgery")


def test_contains_on_missing_file(store):
    assert store.contains("xray") is False