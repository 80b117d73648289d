"""Client mirrors: local state handling and derived figures."""

import pytest

from moto_dash_client import (
    ApiError,
    BikeMirror,
    FuelMirror,
    MaintenanceMirror,
    MotoDashClient,
    PartMirror,
    TourMirror,
)


@pytest.fixture
def api(client):
    return MotoDashClient(base_url="http://testserver", session=client)


def fuel_mirror_with(entries):
    mirror = FuelMirror(MotoDashClient(base_url="http://unused"))
    mirror.items = entries
    return mirror


def test_fuel_consumption_figures():
    mirror = fuel_mirror_with(
        [
            {"liters": 10, "cost": 25, "distance": 200},
            {"liters": 20, "cost": 50, "distance": 300},
        ]
    )
    assert mirror.total_liters == 30
    assert mirror.total_cost == 75
    assert mirror.total_distance == 500
    assert mirror.liters_per_100 == pytest.approx(6.0)
    assert mirror.cost_per_distance == pytest.approx(0.15)


def test_fuel_rates_are_zero_without_distance():
    mirror = fuel_mirror_with([{"liters": 12, "cost": 30, "distance": 0}])
    assert mirror.liters_per_100 == 0
    assert mirror.cost_per_distance == 0
    assert fuel_mirror_with([]).liters_per_100 == 0


def test_invalid_values_count_as_zero():
    mirror = fuel_mirror_with([{"liters": "abc", "cost": None}, {"liters": "5"}])
    assert mirror.total_liters == 5
    assert mirror.total_cost == 0


def test_mirror_follows_server_state(api):
    bikes = BikeMirror(api)
    assert bikes.fetch() == []

    first = bikes.add({"name": "Tenere", "year": 2019, "mileage": "1200"})
    second = bikes.add({"name": "Africa Twin", "year": 2021, "mileage": 800})
    assert [b["id"] for b in bikes.items] == [second["id"], first["id"]]
    assert bikes.total_count == 2
    assert bikes.total_mileage == 2000

    updated = bikes.update(first["id"], {"mileage": 1500})
    assert bikes.find(first["id"]) == updated
    assert bikes.total_mileage == 2300

    bikes.remove(second["id"])
    assert [b["id"] for b in bikes.items] == [first["id"]]

    assert BikeMirror(api).fetch() == bikes.items


def test_failures_are_recorded_and_raised(api):
    fuel = FuelMirror(api)
    fuel.fetch()

    with pytest.raises(ApiError) as exc_info:
        fuel.add({"bikeId": "b1"})

    assert exc_info.value.status_code == 400
    assert fuel.last_error is exc_info.value
    assert {e["field"] for e in fuel.last_error.errors} == {"date", "liters", "cost", "distance"}
    assert fuel.items == []

    with pytest.raises(ApiError) as exc_info:
        fuel.update("missing", {"notes": "x"})
    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "Fuel entry not found"
    assert exc_info.value.errors == []

    fuel.fetch()
    assert fuel.last_error is None


def test_aggregates_of_other_resources(api):
    maintenance = MaintenanceMirror(api)
    maintenance.add({"bikeId": "b1", "date": "2024-01-10", "type": "Oil", "mileage": 1000, "cost": 60})
    maintenance.add({"bikeId": "b1", "date": "2024-03-10", "type": "Tyres", "mileage": 3000, "cost": 240.5})
    assert maintenance.total_cost == pytest.approx(300.5)

    tours = TourMirror(api)
    tours.add({"bikeId": "b1", "name": "Loop", "distance": 120})
    tours.add({"bikeId": "b1", "name": "Pass", "distance": 80.5})
    assert tours.total_distance == pytest.approx(200.5)

    parts = PartMirror(api)
    parts.add({"bikeId": "b1", "name": "Chain"})
    assert parts.total_count == 1
    assert parts.fetch()[0]["name"] == "Chain"


def test_health_through_client(api):
    assert api.health()["status"] == "ok"
