"""
Application package initializer.

The package is organised into ``core`` (configuration, logging,
database, errors), ``schemas`` (pydantic models per resource),
``services`` (store adapter and CRUD services) and ``api`` (versioned
routers).  Bikes, fuel entries, maintenance entries, parts and tours
share one generic service and one router factory; a resource differs
from the others only by its descriptor.
"""

from .main import app, create_app  # noqa: F401
