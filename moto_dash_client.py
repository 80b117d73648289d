"""MotoDash API client and client-side state mirrors.

This module is the Python counterpart of the web frontend's stores.
:class:`MotoDashClient` is a thin wrapper around the REST API that
uses the ``requests`` library internally.  On top of it, one
:class:`ResourceMirror` per resource keeps an in-memory copy of the
collection and exposes derived figures:

* :class:`BikeMirror` – number of bikes and their total mileage.
* :class:`FuelMirror` – liters, cost and distance totals plus the
  average consumption (liters per 100 distance units) and cost per
  distance unit.
* :class:`MaintenanceMirror` – total maintenance cost.
* :class:`PartMirror` – number of parts.
* :class:`TourMirror` – total distance toured.

The mirrors only change their local state after the server has
confirmed an operation.  A failed call is stored in ``last_error`` and
re-raised; nothing is retried or rolled back.  Aggregates are plain
properties computed from ``items`` on every access, so they always
reflect the current collection.

Example::

    client = MotoDashClient(base_url="http://localhost:4000")
    fuel = FuelMirror(client)
    fuel.fetch()
    print(fuel.liters_per_100, fuel.cost_per_distance)
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Optional

import requests


logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Raised when an API call fails.

    Attributes:
        status_code: HTTP status of the response, or ``None`` when the
            server could not be reached.
        message: Error message reported by the server (or the
            transport error).
        errors: Field-level problems of a rejected payload, as
            ``{"field": ..., "message": ...}`` dicts.  Empty for
            other failures.
    """

    def __init__(
        self,
        status_code: Optional[int],
        message: str,
        errors: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.errors = errors or []
        super().__init__(f"API error ({status_code}): {message}" if status_code else message)


class MotoDashClient:
    """Client for the MotoDash REST API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:4000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.  Any object with
                a compatible ``request`` method can be used.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Any:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/bikes``).
            json_body: JSON body to send with the request.
        Returns:
            The parsed JSON response, or ``None`` for empty responses
            such as ``204 No Content``.
        Raises:
            ApiError: If the request fails or the server answers with
                an error status.
        """
        url = f"{self.base_url}{path}"
        logger.debug("Sending %s request to %s", method, url)
        try:
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            raise ApiError(None, str(exc)) from exc

        if response.status_code >= 400:
            message = ""
            errors = None
            try:
                err_json = response.json()
                if isinstance(err_json, dict):
                    message = err_json.get("message") or err_json.get("detail") or str(err_json)
                    errors = err_json.get("errors")
            except ValueError:
                message = response.text
            if not message:
                message = f"API error ({response.status_code})"
            logger.error("API request failed (%s): %s", response.status_code, message)
            raise ApiError(response.status_code, message, errors)

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    # ------------------------------------------------------------------
    # Resource operations
    # ------------------------------------------------------------------
    def list(self, resource: str) -> List[Dict[str, Any]]:
        """Return all records of ``resource`` (e.g. ``"bikes"``)."""
        return self._request("GET", f"/{resource}") or []

    def get(self, resource: str, record_id: str) -> Dict[str, Any]:
        return self._request("GET", f"/{resource}/{record_id}")

    def create(self, resource: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", f"/{resource}", json_body=payload)

    def update(self, resource: str, record_id: str, patch: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/{resource}/{record_id}", json_body=patch)

    def delete(self, resource: str, record_id: str) -> None:
        self._request("DELETE", f"/{resource}/{record_id}")

    def health(self) -> Dict[str, Any]:
        return self._request("GET", "/health")


def _number(value: Any) -> float:
    """Interpret a stored value as a number, treating junk as 0."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


class ResourceMirror:
    """In-memory copy of one resource collection.

    Subclasses set :attr:`resource` and add their derived figures.
    """

    resource: str = ""

    def __init__(self, client: MotoDashClient) -> None:
        self.client = client
        self.items: List[Dict[str, Any]] = []
        self.is_loading = False
        self.last_error: Optional[Exception] = None

    def fetch(self) -> List[Dict[str, Any]]:
        """Replace the local collection with the server's list."""
        self.is_loading = True
        self.last_error = None
        try:
            self.items = self.client.list(self.resource)
        except ApiError as exc:
            self.last_error = exc
            raise
        finally:
            self.is_loading = False
        return self.items

    def add(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Create a record and put it at the front of the collection."""
        try:
            record = self.client.create(self.resource, payload)
        except ApiError as exc:
            self.last_error = exc
            raise
        self.items = [record, *self.items]
        return record

    def update(self, record_id: str, patch: Dict[str, Any]) -> Dict[str, Any]:
        """Update a record and replace the local copy with the server's answer."""
        try:
            updated = self.client.update(self.resource, record_id, patch)
        except ApiError as exc:
            self.last_error = exc
            raise
        self.items = [updated if item.get("id") == record_id else item for item in self.items]
        return updated

    def remove(self, record_id: str) -> None:
        """Delete a record and drop it from the collection."""
        try:
            self.client.delete(self.resource, record_id)
        except ApiError as exc:
            self.last_error = exc
            raise
        self.items = [item for item in self.items if item.get("id") != record_id]

    def find(self, record_id: str) -> Optional[Dict[str, Any]]:
        for item in self.items:
            if item.get("id") == record_id:
                return item
        return None

    def total(self, field: str) -> float:
        """Sum ``field`` over the collection; missing or invalid values count as 0."""
        return sum(_number(item.get(field)) for item in self.items)

    @property
    def total_count(self) -> int:
        return len(self.items)


class BikeMirror(ResourceMirror):
    resource = "bikes"

    @property
    def total_mileage(self) -> float:
        return self.total("mileage")


class FuelMirror(ResourceMirror):
    """Fuel entries with consumption figures.

    Both rates are 0 when no distance has been recorded yet.
    """

    resource = "fuel"

    @property
    def total_liters(self) -> float:
        return self.total("liters")

    @property
    def total_cost(self) -> float:
        return self.total("cost")

    @property
    def total_distance(self) -> float:
        return self.total("distance")

    @property
    def liters_per_100(self) -> float:
        distance = self.total_distance
        if not distance:
            return 0.0
        return self.total_liters * 100 / distance

    @property
    def cost_per_distance(self) -> float:
        distance = self.total_distance
        if not distance:
            return 0.0
        return self.total_cost / distance


class MaintenanceMirror(ResourceMirror):
    resource = "maintenance"

    @property
    def total_cost(self) -> float:
        return self.total("cost")


class PartMirror(ResourceMirror):
    resource = "parts"


class TourMirror(ResourceMirror):
    resource = "tours"

    @property
    def total_distance(self) -> float:
        return self.total("distance")
