"""
Endpoint subpackage for API v1.

``resources`` builds the CRUD routers for bikes, fuel, maintenance,
parts and tours; ``health`` exposes the liveness check.  The routers
are aggregated in ``router.py`` at the package level.
"""
