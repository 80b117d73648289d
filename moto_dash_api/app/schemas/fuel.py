"""
Pydantic schemas for fuel entries.

``cost`` is the total amount paid for the fill-up; the price per liter
is not stored.  ``distance`` is the distance ridden since the previous
fill-up and feeds the consumption figures computed by clients.
"""

from typing import ClassVar, FrozenSet, Optional

from pydantic import Field

from .common import Amount, CreateModel, OptionalText, ReadModel, RequiredText, UpdateModel


class FuelCreate(CreateModel):
    bike_id: RequiredText
    date: RequiredText = Field(..., examples=["2025-05-17"])
    liters: Amount = Field(..., examples=[14.2])
    cost: Amount = Field(..., examples=[25.4])
    distance: Amount = Field(..., examples=[310])
    notes: OptionalText = ""


class FuelUpdate(UpdateModel):
    clearable: ClassVar[FrozenSet[str]] = frozenset({"notes"})

    bike_id: Optional[RequiredText] = None
    date: Optional[RequiredText] = None
    liters: Optional[Amount] = None
    cost: Optional[Amount] = None
    distance: Optional[Amount] = None
    notes: Optional[OptionalText] = None


class FuelRead(ReadModel):
    bike_id: str
    date: str
    liters: float
    cost: float
    distance: float
    notes: str
