"""
Generic CRUD service shared by all resources.

A ``ResourceService`` is created once per resource type from a
``ResourceDescriptor`` and the store adapter built at start-up.  The
service validates payloads with the descriptor's pydantic models,
assigns identifiers and timestamps, performs exactly one write per
call and re-reads the record afterwards so callers always receive the
stored (canonical) version.

Errors are raised as the types from ``core.errors``; storage errors
from the adapter are not caught here.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Tuple, Type

from pydantic import BaseModel, ValidationError

from moto_dash_api.app.core.errors import (
    EmptyUpdateError,
    RequestValidationFailed,
    ResourceNotFound,
)
from moto_dash_api.app.services.store import ResourceStore

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


@dataclass(frozen=True)
class ResourceDescriptor:
    """Static description of one resource type.

    Attributes:
        name: URL segment under which the resource is exposed (``bikes``).
        label: Human readable singular name used in messages (``Bike``).
        table: SQLite table holding the records.
        create_model: Schema validating create payloads.
        update_model: Schema validating partial update payloads.
        read_model: Schema of the records returned to clients.
        order_by: ``(column, direction)`` pairs defining the list order.
    """

    name: str
    label: str
    table: str
    create_model: Type[BaseModel]
    update_model: Type[BaseModel]
    read_model: Type[BaseModel]
    order_by: Tuple[Tuple[str, str], ...] = (("created_at", "DESC"),)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


def parse_timestamp(value: str) -> datetime:
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _field_errors(exc: ValidationError) -> List[Dict[str, str]]:
    errors = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "payload"
        errors.append({"field": field, "message": error["msg"]})
    return errors


class ResourceService:
    """CRUD operations for a single resource type."""

    def __init__(
        self,
        descriptor: ResourceDescriptor,
        store: ResourceStore,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.descriptor = descriptor
        self.store = store
        self.clock = clock

    @property
    def label(self) -> str:
        return self.descriptor.label

    def list(self) -> List[BaseModel]:
        """Return every record in the resource's declared order."""
        rows = self.store.list(self.descriptor.table, self.descriptor.order_by)
        return [self._to_read(row) for row in rows]

    def get(self, record_id: str) -> BaseModel:
        """Return a single record or raise ``ResourceNotFound``."""
        row = self.store.get(self.descriptor.table, record_id)
        if row is None:
            raise ResourceNotFound(self.label, record_id)
        return self._to_read(row)

    def create(self, payload: Any) -> BaseModel:
        """Validate ``payload``, store it as a new record and return it.

        The identifier is generated unless the payload carries one.
        ``createdAt`` and ``updatedAt`` are both set to the current
        time.
        """
        data = self._validate(self.descriptor.create_model, payload).model_dump()
        record_id = data.pop("id", None) or str(uuid.uuid4())
        now = format_timestamp(self.clock())
        record = {"id": record_id, **data, "created_at": now, "updated_at": now}

        self.store.insert(self.descriptor.table, record)
        logger.info("Created %s %s", self.label, record_id)
        return self.get(record_id)

    def update(self, record_id: str, payload: Any) -> BaseModel:
        """Apply the supplied fields of ``payload`` to an existing record.

        Raises ``EmptyUpdateError`` when the payload holds no known
        field and ``ResourceNotFound`` when the record does not exist;
        neither case writes anything.  ``updatedAt`` always moves
        forward, even when the clock has not advanced since the last
        write.
        """
        validated = self._validate(self.descriptor.update_model, payload)
        fields = validated.model_dump(exclude_unset=True)
        if not fields:
            raise EmptyUpdateError()

        current = self.store.get(self.descriptor.table, record_id)
        if current is None:
            raise ResourceNotFound(self.label, record_id)

        fields["updated_at"] = self._next_update_timestamp(current.get("updated_at"))
        self.store.update(self.descriptor.table, record_id, fields)
        logger.info(
            "Updated %s %s (%s)",
            self.label,
            record_id,
            ", ".join(sorted(k for k in fields if k != "updated_at")),
        )
        return self.get(record_id)

    def delete(self, record_id: str) -> bool:
        """Delete a record.  Unknown identifiers are not an error.

        Returns ``True`` if a record was removed.  Records of other
        resources pointing at this one are left untouched.
        """
        removed = self.store.delete(self.descriptor.table, record_id) > 0
        if removed:
            logger.info("Deleted %s %s", self.label, record_id)
        else:
            logger.debug("Delete of unknown %s %s ignored", self.label, record_id)
        return removed

    def _validate(self, model: Type[BaseModel], payload: Any) -> BaseModel:
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            errors = _field_errors(exc)
            logger.debug("Rejected %s payload: %s", self.label, errors)
            raise RequestValidationFailed(errors) from exc

    def _next_update_timestamp(self, previous: Any) -> str:
        now = self.clock()
        if previous:
            last = parse_timestamp(previous)
            if now <= last:
                now = last + timedelta(microseconds=1)
        return format_timestamp(now)

    def _to_read(self, row: Dict[str, Any]) -> BaseModel:
        return self.descriptor.read_model.model_validate(row)
