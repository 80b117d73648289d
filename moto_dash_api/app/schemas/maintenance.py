"""Pydantic schemas for maintenance entries (service, repairs, inspections)."""

from typing import ClassVar, FrozenSet, Optional

from pydantic import Field

from .common import Amount, Count, CreateModel, OptionalText, ReadModel, RequiredText, UpdateModel


class MaintenanceCreate(CreateModel):
    """Schema for recording a maintenance event."""

    bike_id: RequiredText
    date: RequiredText = Field(..., examples=["2025-03-02"])
    type: RequiredText = Field(..., examples=["Oil change"])
    mileage: Count = Field(..., examples=[15800])
    cost: Amount = Field(..., examples=[89.9])
    notes: OptionalText = ""


class MaintenanceUpdate(UpdateModel):
    """Schema for updating a maintenance event.

    All fields are optional; only provided values will be updated.
    """

    clearable: ClassVar[FrozenSet[str]] = frozenset({"notes"})

    bike_id: Optional[RequiredText] = None
    date: Optional[RequiredText] = None
    type: Optional[RequiredText] = None
    mileage: Optional[Count] = None
    cost: Optional[Amount] = None
    notes: Optional[OptionalText] = None


class MaintenanceRead(ReadModel):
    """Schema for a stored maintenance event."""

    bike_id: str
    date: str
    type: str
    mileage: int
    cost: float
    notes: str
