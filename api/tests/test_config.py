"""Tests for settings parsing."""
import pytest

from app.core.config import DEFAULT_DATABASE_URL, Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("DATABASE_URL", "PORT", "HOST", "LOG_LEVEL", "CREATE_TABLES", "API_V1_PREFIX"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.database_url == DEFAULT_DATABASE_URL
    assert settings.port == 8080
    assert settings.host == "0.0.0.0"
    assert settings.api_v1_prefix == "/api/v1"
    assert settings.create_tables is True


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/app")
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.database_url == "postgresql://u:p@db:5432/app"
    assert settings.port == 9000
    assert settings.log_level == "DEBUG"


def test_postgres_scheme_is_normalized():
    settings = Settings(_env_file=None, database_url="postgres://u:p@db/app")
    assert settings.database_url == "postgresql://u:p@db/app"


def test_empty_database_url_falls_back():
    settings = Settings(_env_file=None, database_url="  ")
    assert settings.database_url == DEFAULT_DATABASE_URL


@pytest.mark.parametrize("value", ["not-a-port", "0", "70000"])
def test_invalid_port_falls_back(value):
    assert Settings(_env_file=None, port=value).port == 8080
