"""Logging is configured from the settings when the app starts."""

import logging

import pytest
from fastapi.testclient import TestClient

from moto_dash_api.app.core.config import Settings
from moto_dash_api.app.core.logging_config import setup_logging
from moto_dash_api.app.main import create_app


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    yield root
    setup_logging("WARNING")


def console_handlers(logger):
    return [h for h in logger.handlers if type(h) is logging.StreamHandler]


def test_settings_level_applies_on_startup(db_path, root_logger):
    setup_logging("DEBUG")

    with TestClient(create_app(Settings(database_path=db_path, log_level="ERROR"))):
        assert root_logger.level == logging.ERROR


def test_log_file_is_written(db_path, tmp_path, root_logger):
    log_file = tmp_path / "logs" / "api.log"
    settings = Settings(database_path=db_path, log_level="INFO", log_file=str(log_file))

    with TestClient(create_app(settings)) as client:
        client.get("/health")

    assert log_file.exists()
    assert "started" in log_file.read_text(encoding="utf-8")


def test_repeated_setup_replaces_own_handlers(root_logger):
    foreign = logging.NullHandler()
    root_logger.addHandler(foreign)
    try:
        setup_logging("INFO")
        setup_logging("warning")

        assert len(console_handlers(root_logger)) == 1
        assert foreign in root_logger.handlers
        assert root_logger.level == logging.WARNING
    finally:
        root_logger.removeHandler(foreign)


def test_unknown_level_falls_back_to_info(root_logger):
    setup_logging("chatty")
    assert root_logger.level == logging.INFO
