"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API can be started locally without any configuration.  Values are read
when ``Settings`` is instantiated, which lets tests build their own
instance after adjusting the environment (or by passing keyword
arguments).
"""

import os
from dataclasses import dataclass, field


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: _env("PROJECT_NAME", "MotoDash API"))
    api_version: str = field(default_factory=lambda: _env("API_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    # Optional path of a log file.  Empty means console logging only.
    log_file: str = field(default_factory=lambda: _env("LOG_FILE", ""))

    # Path of the SQLite database file.  Relative paths are resolved
    # against the project root by the ``db`` module.
    database_path: str = field(default_factory=lambda: _env("DATABASE_PATH", "data/moto-dash.db"))

    # Allowed origin for cross-origin requests from the web frontend.
    cors_origin: str = field(default_factory=lambda: _env("CORS_ORIGIN", "*"))

    host: str = field(default_factory=lambda: _env("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(_env("PORT", "4000")))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
