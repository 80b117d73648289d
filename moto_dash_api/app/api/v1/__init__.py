"""
Version 1 of the API.

This subpackage bundles all endpoints of the first public version of
the MotoDash API.  Breaking changes should be introduced in a new
version subpackage (e.g. ``v2``).
"""
