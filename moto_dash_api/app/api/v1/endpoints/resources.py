"""
CRUD endpoints for the fleet resources.

The five resources share the same REST shape, so their routers are
produced by ``build_resource_router`` from the resource descriptors.
Handlers are thin: they resolve the service for their resource from
``app.state.services`` and hand the raw JSON body to it.  Validation
happens in the service so that field errors and empty updates are
reported the same way for every resource (see the exception handlers
in ``main.py``).
"""

from typing import Any, Callable, List

from fastapi import APIRouter, Body, Depends, Request, status

from moto_dash_api.app.services.resource_service import ResourceDescriptor, ResourceService


def service_dependency(name: str) -> Callable[[Request], ResourceService]:
    """Return a dependency resolving the service registered under ``name``."""

    def dependency(request: Request) -> ResourceService:
        return request.app.state.services[name]

    return dependency


def _request_body_schema(model) -> dict:
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema(by_alias=True)}},
        }
    }


def build_resource_router(descriptor: ResourceDescriptor) -> APIRouter:
    """Create the list/get/create/update/delete routes for one resource."""
    router = APIRouter()
    get_service = service_dependency(descriptor.name)
    read_model = descriptor.read_model
    label = descriptor.label

    @router.get("", response_model=List[read_model], summary=f"List {descriptor.name}")
    def list_records(service: ResourceService = Depends(get_service)) -> List[Any]:
        """Return all records, most recent first."""
        return service.list()

    @router.get("/{record_id}", response_model=read_model, summary=f"Get {label.lower()}")
    def get_record(record_id: str, service: ResourceService = Depends(get_service)) -> Any:
        """Return a single record.  Responds with 404 if it does not exist."""
        return service.get(record_id)

    @router.post(
        "",
        response_model=read_model,
        status_code=status.HTTP_201_CREATED,
        summary=f"Create {label.lower()}",
        openapi_extra=_request_body_schema(descriptor.create_model),
    )
    def create_record(
        payload: Any = Body(...),
        service: ResourceService = Depends(get_service),
    ) -> Any:
        """Create a record.  The identifier is generated if not supplied."""
        return service.create(payload)

    @router.put(
        "/{record_id}",
        response_model=read_model,
        summary=f"Update {label.lower()}",
        openapi_extra=_request_body_schema(descriptor.update_model),
    )
    def update_record(
        record_id: str,
        payload: Any = Body(...),
        service: ResourceService = Depends(get_service),
    ) -> Any:
        """Update the supplied fields of a record."""
        return service.update(record_id, payload)

    @router.delete(
        "/{record_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        summary=f"Delete {label.lower()}",
    )
    def delete_record(record_id: str, service: ResourceService = Depends(get_service)) -> None:
        """Delete a record.  Deleting an unknown identifier succeeds as well."""
        service.delete(record_id)
        return None

    return router
