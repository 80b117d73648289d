"""Behaviour of the generic CRUD service against a real SQLite file."""

import pytest

from moto_dash_api.app.core.errors import (
    EmptyUpdateError,
    RequestValidationFailed,
    ResourceNotFound,
)
from moto_dash_api.app.services.resource_service import ResourceService, parse_timestamp
from moto_dash_api.app.services.resources import BIKES, FUEL, TOURS


@pytest.fixture
def bikes(store, clock):
    return ResourceService(BIKES, store, clock=clock)


@pytest.fixture
def tours(store, clock):
    return ResourceService(TOURS, store, clock=clock)


def test_create_assigns_id_and_timestamps(bikes, bike_payload):
    bike = bikes.create(bike_payload)

    assert bike.id
    assert bike.created_at == bike.updated_at
    assert bike.name == "Africa Twin"
    assert bike.notes == ""
    assert bikes.get(bike.id) == bike


def test_create_keeps_client_supplied_id(bikes, bike_payload):
    bike = bikes.create({**bike_payload, "id": "my-bike"})
    assert bike.id == "my-bike"


def test_create_coerces_numeric_strings(bikes):
    bike = bikes.create({"name": "Tenere", "year": "2019", "mileage": "1200"})
    assert bike.mileage == 1200


def test_invalid_payload_is_rejected_before_storage(bikes, store):
    with pytest.raises(RequestValidationFailed) as exc_info:
        bikes.create({"name": "", "year": 1899, "mileage": 0})

    assert {e["field"] for e in exc_info.value.errors} == {"name", "year"}
    assert store.list("bikes", BIKES.order_by) == []


def test_non_object_payload_is_a_validation_error(bikes):
    with pytest.raises(RequestValidationFailed) as exc_info:
        bikes.create(["not", "a", "record"])
    assert exc_info.value.errors[0]["field"] == "payload"


def test_get_unknown_id_raises_not_found(bikes):
    with pytest.raises(ResourceNotFound):
        bikes.get("missing")


def test_partial_update_leaves_other_fields_untouched(bikes, bike_payload, clock):
    bike = bikes.create(bike_payload)
    clock.advance()

    updated = bikes.update(bike.id, {"notes": "new chain"})

    assert updated.notes == "new chain"
    before = bike.model_dump(exclude={"notes", "updated_at"})
    after = updated.model_dump(exclude={"notes", "updated_at"})
    assert after == before
    assert parse_timestamp(updated.updated_at) > parse_timestamp(bike.updated_at)


def test_updated_at_increases_even_without_clock_progress(bikes, bike_payload):
    bike = bikes.create(bike_payload)
    first = bikes.update(bike.id, {"mileage": 13000})
    second = bikes.update(bike.id, {"mileage": 13100})

    assert parse_timestamp(first.updated_at) > parse_timestamp(bike.updated_at)
    assert parse_timestamp(second.updated_at) > parse_timestamp(first.updated_at)
    assert second.created_at == bike.created_at


def test_empty_update_is_rejected_without_write(bikes, bike_payload, clock):
    bike = bikes.create(bike_payload)
    clock.advance()

    with pytest.raises(EmptyUpdateError):
        bikes.update(bike.id, {})
    with pytest.raises(EmptyUpdateError):
        bikes.update(bike.id, {"colour": "red"})

    assert bikes.get(bike.id).updated_at == bike.updated_at


def test_update_unknown_id_raises_not_found(bikes, store):
    with pytest.raises(ResourceNotFound):
        bikes.update("missing", {"notes": "x"})
    assert store.get("bikes", "missing") is None


def test_delete_is_idempotent(bikes, bike_payload):
    keep = bikes.create({**bike_payload, "name": "Keep"})
    drop = bikes.create({**bike_payload, "name": "Drop"})

    assert bikes.delete(drop.id) is True
    after_first = bikes.list()
    assert bikes.delete(drop.id) is False
    assert bikes.list() == after_first == [keep]


def test_tours_are_listed_newest_first(tours):
    created = [
        tours.create({"bikeId": "b1", "name": name, "distance": 100})
        for name in ("first", "second", "third")
    ]
    assert [t.name for t in tours.list()] == ["third", "second", "first"]
    assert {t.id for t in tours.list()} == {t.id for t in created}


def test_fuel_is_listed_by_date_then_creation(store, clock):
    fuel = ResourceService(FUEL, store, clock=clock)
    entry = {"bikeId": "b1", "liters": 10, "cost": 20, "distance": 200}
    fuel.create({**entry, "date": "2024-05-01", "notes": "a"})
    clock.advance()
    fuel.create({**entry, "date": "2024-06-01", "notes": "b"})
    clock.advance()
    fuel.create({**entry, "date": "2024-05-01", "notes": "c"})

    assert [f.notes for f in fuel.list()] == ["b", "c", "a"]


def test_deleting_a_bike_leaves_dependents_orphaned(services, bike_payload):
    bike = services["bikes"].create(bike_payload)
    dependents = {
        "fuel": {"bikeId": bike.id, "date": "2024-05-01", "liters": 10, "cost": 20, "distance": 200},
        "maintenance": {"bikeId": bike.id, "date": "2024-05-02", "type": "Oil", "mileage": 13000, "cost": 60},
        "parts": {"bikeId": bike.id, "name": "Chain"},
        "tours": {"bikeId": bike.id, "name": "Loop", "distance": 150},
    }
    stored = {name: services[name].create(payload) for name, payload in dependents.items()}

    services["bikes"].delete(bike.id)

    for name, record in stored.items():
        assert services[name].list() == [record]
        assert services[name].get(record.id).bike_id == bike.id
