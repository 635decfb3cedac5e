import importlib

import pytest

from event_attendance.config import get_settings_module


@pytest.mark.parametrize(
    "env, module",
    [
        (None, "event_attendance.config.development"),
        ("development", "event_attendance.config.development"),
        ("PROD", "event_attendance.config.production"),
        ("production", "event_attendance.config.production"),
        ("test", "event_attendance.config.testing"),
        ("testing", "event_attendance.config.testing"),
        ("staging", "event_attendance.config.development"),
    ],
)
def test_get_settings_module(monkeypatch, env, module):
    if env is None:
        monkeypatch.delenv("APP_ENV", raising=False)
    else:
        monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == module


def test_testing_settings_are_fixed():
    settings = importlib.import_module("event_attendance.config.testing")

    assert settings.TESTING is True
    assert settings.CSV_DELIMITER == ","
    assert settings.CSV_WITH_BOM is True
    assert settings.DB_CONFIG["database"]


def test_db_config_from_settings_dict():
    from event_attendance.database.connection import DBConfig

    config = DBConfig.from_dict({"host": "db", "port": "3307", "user": "app", "database": "eventos"})

    assert config.port == 3307
    assert config.password == ""
    assert config.charset == "utf8mb4"
    assert config.describe() == "app@db:3307/eventos"
