"""
Descriptors of the five resources exposed by the API.

Bikes, parts and tours are listed newest first.  Fuel and maintenance
entries are listed by the date of the event, newest first, with the
creation time breaking ties between entries of the same day.
"""

from typing import Dict, Tuple

from moto_dash_api.app.schemas.bike import BikeCreate, BikeRead, BikeUpdate
from moto_dash_api.app.schemas.fuel import FuelCreate, FuelRead, FuelUpdate
from moto_dash_api.app.schemas.maintenance import (
    MaintenanceCreate,
    MaintenanceRead,
    MaintenanceUpdate,
)
from moto_dash_api.app.schemas.part import PartCreate, PartRead, PartUpdate
from moto_dash_api.app.schemas.tour import TourCreate, TourRead, TourUpdate
from moto_dash_api.app.services.resource_service import ResourceDescriptor, ResourceService
from moto_dash_api.app.services.store import ResourceStore

NEWEST_FIRST = (("created_at", "DESC"),)
BY_EVENT_DATE = (("date", "DESC"), ("created_at", "DESC"))

BIKES = ResourceDescriptor(
    name="bikes",
    label="Bike",
    table="bikes",
    create_model=BikeCreate,
    update_model=BikeUpdate,
    read_model=BikeRead,
    order_by=NEWEST_FIRST,
)

FUEL = ResourceDescriptor(
    name="fuel",
    label="Fuel entry",
    table="fuel",
    create_model=FuelCreate,
    update_model=FuelUpdate,
    read_model=FuelRead,
    order_by=BY_EVENT_DATE,
)

MAINTENANCE = ResourceDescriptor(
    name="maintenance",
    label="Maintenance entry",
    table="maintenance",
    create_model=MaintenanceCreate,
    update_model=MaintenanceUpdate,
    read_model=MaintenanceRead,
    order_by=BY_EVENT_DATE,
)

PARTS = ResourceDescriptor(
    name="parts",
    label="Part",
    table="parts",
    create_model=PartCreate,
    update_model=PartUpdate,
    read_model=PartRead,
    order_by=NEWEST_FIRST,
)

TOURS = ResourceDescriptor(
    name="tours",
    label="Tour",
    table="tours",
    create_model=TourCreate,
    update_model=TourUpdate,
    read_model=TourRead,
    order_by=NEWEST_FIRST,
)

RESOURCES: Tuple[ResourceDescriptor, ...] = (BIKES, FUEL, MAINTENANCE, PARTS, TOURS)


def build_services(store: ResourceStore) -> Dict[str, ResourceService]:
    """Create one service per resource, all sharing ``store``."""
    return {descriptor.name: ResourceService(descriptor, store) for descriptor in RESOURCES}
