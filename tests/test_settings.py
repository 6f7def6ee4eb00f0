import pytest

from buildmarket.core import settings


def test_database_url_is_required(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(RuntimeError):
        settings.database_url()


def test_sslmode_is_stripped(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/market?sslmode=require&application_name=api")
    assert settings.database_url() == "postgresql://u:p@db:5432/market?application_name=api"


def test_pool_sizes(monkeypatch):
    monkeypatch.setenv("DB_POOL_MIN_SIZE", "3")
    monkeypatch.setenv("DB_POOL_MAX_SIZE", "2")
    assert settings.pool_min_size() == 3
    assert settings.pool_max_size() == 3


def test_bool_flags(monkeypatch):
    monkeypatch.setenv("SEED_ON_STARTUP", "yes")
    monkeypatch.setenv("APPLY_SCHEMA", "0")
    assert settings.seed_on_startup() is True
    assert settings.apply_schema_on_startup() is False


def test_bad_int_falls_back(monkeypatch):
    monkeypatch.setenv("DB_COMMAND_TIMEOUT", "soon")
    assert settings.command_timeout() == 30
