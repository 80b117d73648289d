"""
Pydantic schemas for bikes.

A bike is the root entity of the fleet: fuel, maintenance, part and
tour records point at it through ``bikeId``.  ``name`` is the display
name; ``manufacturer`` and ``model`` are optional details.
"""

from typing import ClassVar, FrozenSet, Optional

from pydantic import Field

from .common import (
    Amount,
    Count,
    CreateModel,
    ImageUrl,
    OptionalText,
    ReadModel,
    RequiredText,
    UpdateModel,
    Year,
)


class BikeCreate(CreateModel):
    """Schema for creating a bike."""

    name: RequiredText = Field(..., examples=["Africa Twin"])
    manufacturer: OptionalText = Field("", examples=["Honda"])
    model: OptionalText = Field("", examples=["CRF1100L"])
    year: Year = Field(..., examples=[2021])
    mileage: Count = Field(..., examples=[12400])
    first_registration: OptionalText = Field("", examples=["2021-04-01"])
    purchase_price: Amount = 0
    image: ImageUrl = ""
    notes: OptionalText = ""


class BikeUpdate(UpdateModel):
    """Schema for updating a bike.  Only supplied fields are changed."""

    clearable: ClassVar[FrozenSet[str]] = frozenset({"manufacturer", "model", "first_registration", "image", "notes"})

    name: Optional[RequiredText] = None
    manufacturer: Optional[OptionalText] = None
    model: Optional[OptionalText] = None
    year: Optional[Year] = None
    mileage: Optional[Count] = None
    first_registration: Optional[OptionalText] = None
    purchase_price: Optional[Amount] = None
    image: Optional[ImageUrl] = None
    notes: Optional[OptionalText] = None


class BikeRead(ReadModel):
    """Schema for a stored bike."""

    name: str
    manufacturer: str
    model: str
    year: int
    mileage: int
    first_registration: str
    purchase_price: float
    image: str
    notes: str
