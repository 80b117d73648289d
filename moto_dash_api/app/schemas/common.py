"""
Shared building blocks for the resource schemas.

Every resource is described by three models: ``<Name>Create`` for new
records, ``<Name>Update`` for partial updates and ``<Name>Read`` for
responses.  All of them use snake_case attribute names internally
(matching the SQLite columns) and camelCase names on the wire.

The annotated types below carry the validation rules that are common
to all resources so each schema only has to list its fields.
"""

from datetime import date
from typing import Annotated, Any, ClassVar, FrozenSet, Optional
from urllib.parse import urlparse

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
)
from pydantic.alias_generators import to_camel

MIN_YEAR = 1950
# SQLite INTEGER columns hold signed 64-bit values.
MAX_INTEGER = 2**63 - 1


def _blank_if_none(value: Any) -> Any:
    return "" if value is None else value


def _check_year(value: int) -> int:
    current_year = date.today().year
    if not MIN_YEAR <= value <= current_year:
        raise ValueError(f"Year must be between {MIN_YEAR} and {current_year}")
    return value


def _check_url(value: str) -> str:
    if not value:
        return value
    parsed = urlparse(value)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ValueError("Must be an http(s) URL or empty")
    return value


RequiredText = Annotated[str, Field(min_length=1)]
OptionalText = Annotated[str, BeforeValidator(_blank_if_none)]
Amount = Annotated[float, Field(ge=0, allow_inf_nan=False)]
Count = Annotated[int, Field(ge=0, le=MAX_INTEGER)]
Year = Annotated[int, AfterValidator(_check_year)]
ImageUrl = Annotated[str, BeforeValidator(_blank_if_none), AfterValidator(_check_url)]


class ApiModel(BaseModel):
    """Base model mapping snake_case attributes to camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateModel(ApiModel):
    """Base for create payloads.  A client may supply its own identifier."""

    id: Optional[RequiredText] = None


class UpdateModel(ApiModel):
    """Base for partial update payloads.

    Every field is optional, but a field that is present must satisfy
    the same rule as on create.  An explicit ``null`` is rejected,
    except for the text fields listed in ``clearable`` which are reset
    to an empty string.
    """

    clearable: ClassVar[FrozenSet[str]] = frozenset()

    @field_validator("*", mode="before")
    @classmethod
    def _handle_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is not None:
            return value
        if info.field_name in cls.clearable:
            return ""
        raise ValueError("May not be null")


class ReadModel(ApiModel):
    """Base for records returned by the API."""

    id: str
    created_at: str
    updated_at: str
