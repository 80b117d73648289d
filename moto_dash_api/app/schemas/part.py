"""
Pydantic schemas for parts.

Parts are components fitted to a bike (tyres, chain, accessories).
``installedAt`` is a free-form date string; it may be left empty when
the installation date is unknown.
"""

from typing import ClassVar, FrozenSet, Optional

from pydantic import Field

from .common import Amount, CreateModel, OptionalText, ReadModel, RequiredText, UpdateModel


class PartCreate(CreateModel):
    """Schema for adding a part to a bike."""

    bike_id: RequiredText
    name: RequiredText = Field(..., examples=["Chain kit"])
    manufacturer: OptionalText = Field("", examples=["DID"])
    installed_at: OptionalText = Field("", examples=["2024-08-10"])
    price: Amount = 0
    notes: OptionalText = ""


class PartUpdate(UpdateModel):
    """Schema for updating a part."""

    clearable: ClassVar[FrozenSet[str]] = frozenset({"manufacturer", "installed_at", "notes"})

    bike_id: Optional[RequiredText] = None
    name: Optional[RequiredText] = None
    manufacturer: Optional[OptionalText] = None
    installed_at: Optional[OptionalText] = None
    price: Optional[Amount] = None
    notes: Optional[OptionalText] = None


class PartRead(ReadModel):
    bike_id: str
    name: str
    manufacturer: str
    installed_at: str
    price: float
    notes: str
