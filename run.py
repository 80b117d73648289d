"""Entry point for the MotoDash API server.

Starts the FastAPI application under Uvicorn.  Host, port and the
database location default to the values from the environment (see
``moto_dash_api.app.core.config``) and can be overridden on the
command line.

Usage:
    python run.py
    python run.py --port 5000 --db ./data/garage.db
"""
import argparse
import asyncio
import logging

from uvicorn import Config, Server

from moto_dash_api.app.core.config import Settings
from moto_dash_api.app.core.logging_config import setup_logging
from moto_dash_api.app.main import create_app


def parse_args() -> argparse.Namespace:
    settings = Settings()
    parser = argparse.ArgumentParser(description="Run the MotoDash API.")
    parser.add_argument("--host", default=settings.host, help="Interface to bind (default: %(default)s)")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on (default: %(default)s)")
    parser.add_argument("--db", default=settings.database_path, help="SQLite database file (default: %(default)s)")
    return parser.parse_args()


async def main() -> None:
    """Build the application and serve it until interrupted."""
    args = parse_args()
    settings = Settings(host=args.host, port=args.port, database_path=args.db)
    setup_logging(settings.log_level, settings.log_file or None)
    app = create_app(settings)
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("MotoDash API listening on %s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
