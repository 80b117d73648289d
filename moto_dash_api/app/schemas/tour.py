"""
Pydantic schemas for tours.

``start`` and ``end`` describe where a tour began and ended (place
names or timestamps, the API does not interpret them).  ``gpx`` holds
a reference to a recorded track, typically a URL.
"""

from typing import ClassVar, FrozenSet, Optional

from pydantic import Field

from .common import Amount, CreateModel, OptionalText, ReadModel, RequiredText, UpdateModel


class TourCreate(CreateModel):
    """Schema for recording a tour."""

    bike_id: RequiredText
    name: RequiredText = Field(..., examples=["Alpine passes"])
    start: OptionalText = Field("", examples=["Innsbruck"])
    end: OptionalText = Field("", examples=["Bormio"])
    distance: Amount = Field(..., examples=[212.5])
    gpx: OptionalText = ""
    notes: OptionalText = ""


class TourUpdate(UpdateModel):
    """Schema for updating a tour."""

    clearable: ClassVar[FrozenSet[str]] = frozenset({"start", "end", "gpx", "notes"})

    bike_id: Optional[RequiredText] = None
    name: Optional[RequiredText] = None
    start: Optional[OptionalText] = None
    end: Optional[OptionalText] = None
    distance: Optional[Amount] = None
    gpx: Optional[OptionalText] = None
    notes: Optional[OptionalText] = None


class TourRead(ReadModel):
    """Schema for a stored tour."""

    bike_id: str
    name: str
    start: str
    end: str
    distance: float
    gpx: str
    notes: str
