"""
Configuration Classes for the Todo Service.

Centralises every environment-dependent setting (listening address,
database location, CORS behaviour) into a hierarchy of configuration
classes.  The base ``Config`` class defines development-safe defaults read
from environment variables, while subclasses override only what differs
per environment.

Key Concepts Demonstrated:
- Class-based configuration with inheritance
- Environment-variable overrides with fixed defaults
- A testing profile that runs against an in-memory database
"""

from __future__ import annotations

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent

DEFAULT_PORT = 8080
DEFAULT_DB_FILE = BASE_DIR / "instance" / "todo.db"


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag such as ``1``/``true``/``yes`` from the environment."""
    raw_value = os.environ.get(name)
    if raw_value is None or not raw_value.strip():
        return default
    return raw_value.strip().lower() in {"1", "true", "yes", "on"}


def _database_uri() -> str:
    """Resolve the database URI from ``DATABASE_URL`` or ``DB_FILE``."""
    database_url = os.environ.get("DATABASE_URL", "").strip()
    if database_url:
        return database_url
    db_file = os.environ.get("DB_FILE", "").strip() or str(DEFAULT_DB_FILE)
    return f"sqlite:///{db_file}"


class Config:
    """
    Base configuration with development-safe defaults.

    Attributes:
        HOST: Interface the standalone server binds to.
        PORT: Port the standalone server listens on.
        SQLALCHEMY_DATABASE_URI: Database connection string (default: a
            local SQLite file, overridable with ``DB_FILE`` or
            ``DATABASE_URL``).
        SQLALCHEMY_TRACK_MODIFICATIONS: Disabled to save memory.
        CORS_ALLOW_ALL: Attach permissive CORS headers to every response.
    """

    HOST: str = os.environ.get("HOST", "0.0.0.0")
    PORT: int = int(os.environ.get("PORT", str(DEFAULT_PORT)))
    SQLALCHEMY_DATABASE_URI: str = _database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS: bool = False
    CORS_ALLOW_ALL: bool = _env_flag("CORS_ALLOW_ALL", True)


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG: bool = True
    TESTING: bool = False


class TestingConfig(Config):
    """
    Testing environment configuration.

    Defaults to an in-memory SQLite database so every application instance
    created by the test-suite starts from an empty, private store.
    """

    DEBUG: bool = True
    TESTING: bool = True
    SQLALCHEMY_DATABASE_URI: str = os.environ.get("TEST_DATABASE_URL", "sqlite://")
    SQLALCHEMY_ENGINE_OPTIONS: dict = {"pool_pre_ping": True}


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG: bool = False
    TESTING: bool = False


config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Look up and return the configuration class for the given environment.

    Args:
        env: Environment name (``"development"``, ``"testing"``,
            ``"production"``).  When ``None``, falls back to the
            ``FLASK_ENV`` environment variable, defaulting to
            ``"development"``.

    Returns:
        The configuration class (not an instance) corresponding to the
        requested environment.
    """
    if env is None:
        env = os.environ.get("FLASK_ENV", "development")
    return config.get(env, config["default"])
