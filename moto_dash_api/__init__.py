"""
Top-level package for the MotoDash API.

All functionality lives in submodules under ``app``; the package
provides no public exports of its own.
"""

__all__ = []
