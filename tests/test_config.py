"""Settings validation tests."""

import pytest
from pydantic import ValidationError

from larder.config import Settings
from larder.database import engine_options


def test_development_defaults():
    settings = Settings(_env_file=None)

    assert settings.is_development
    assert settings.recipe_placeholder_image.startswith("/")


def test_production_requires_jwt_secret():
    with pytest.raises(ValidationError, match="JWT_SECRET"):
        Settings(_env_file=None, environment="production", database_url="postgresql://db/larder")


def test_production_rejects_localhost_database():
    with pytest.raises(ValidationError, match="DATABASE_URL"):
        Settings(
            _env_file=None,
            environment="production",
            jwt_secret="a-real-secret",
            database_url="postgresql://u:p@localhost:5432/larder",
        )


def test_production_settings_accepted():
    settings = Settings(
        _env_file=None,
        environment="production",
        jwt_secret="a-real-secret",
        database_url="postgresql://u:p@db:5432/larder",
    )

    assert not settings.is_development


def test_engine_options_for_postgres():
    settings = Settings(
        _env_file=None, database_url="postgresql://u:p@db:5432/larder", database_pool_size=20
    )

    options = engine_options(settings)

    assert options["pool_pre_ping"] is True
    assert options["pool_size"] == 20
    assert options["max_overflow"] == 10


def test_engine_options_for_sqlite():
    settings = Settings(_env_file=None, database_url="sqlite:///./larder.db")

    assert engine_options(settings) == {"connect_args": {"check_same_thread": False}}
