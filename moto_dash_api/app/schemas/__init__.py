"""
Pydantic schema definitions for API payloads.

Each resource (bikes, fuel, maintenance, parts, tours) defines its own
create, update and read models.  Schemas are separated from the store
adapter so the API representation (camelCase) is decoupled from the
SQLite columns (snake_case).
"""
