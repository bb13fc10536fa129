"""
Application configuration classes.

Each class represents a deployment environment. The factory function
``create_app`` in ``workrooms/__init__.py`` selects the appropriate
config based on the FLASK_ENV environment variable.

Development and testing default to SQLite so the directory runs
without a database server; production must point ``DATABASE_URL`` at
the real relational store.
"""

import logging
import os

# Module-level logger for startup warnings emitted by config classes.
_logger = logging.getLogger(__name__)

# Sentinel for detecting an unset DATABASE_URL in production.
_DEFAULT_DATABASE_URI = "sqlite:///workrooms.db"


class BaseConfig:
    """
    Shared configuration values inherited by all environments.

    Connection strings are loaded from environment variables so they
    never appear in source control.
    """

    # -- SQLAlchemy --------------------------------------------------------
    SQLALCHEMY_DATABASE_URI: str = os.environ.get(
        "DATABASE_URL", _DEFAULT_DATABASE_URI
    )
    SQLALCHEMY_TRACK_MODIFICATIONS: bool = False

    # Echo SQL statements to the log for debugging (override per env).
    SQLALCHEMY_ECHO: bool = False

    # -- Logging -----------------------------------------------------------
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")

    @classmethod
    def validate_production_settings(cls, app_config: dict) -> None:
        """
        Verify that the production configuration is usable.

        Called by ``create_app()`` when ``config_name == 'production'``.

        Args:
            app_config: The ``app.config`` dict after loading the
                        config class.

        Raises:
            RuntimeError: If the database URI is still the local
                          SQLite default.
        """
        if app_config.get("SQLALCHEMY_DATABASE_URI") == _DEFAULT_DATABASE_URI:
            raise RuntimeError(
                "DATABASE_URL must be set in production; refusing to run "
                "against the local SQLite default."
            )

        # DEBUG logging with SQL echo leaks personal worker data.
        if app_config.get("LOG_LEVEL", "").upper() == "DEBUG":
            _logger.warning(
                "LOG_LEVEL=DEBUG is not recommended in production — "
                "worker records may appear in logs. Consider INFO or WARNING."
            )


class DevelopmentConfig(BaseConfig):
    """Development environment: verbose logging, SQL echo enabled."""

    DEBUG: bool = True
    SQLALCHEMY_ECHO: bool = True
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "DEBUG")


class TestingConfig(BaseConfig):
    """
    Testing environment: in-memory SQLite unless TEST_DATABASE_URL
    points somewhere else.
    """

    TESTING: bool = True
    SQLALCHEMY_DATABASE_URI: str = os.environ.get("TEST_DATABASE_URL", "sqlite://")
    LOG_LEVEL: str = "DEBUG"


class ProductionConfig(BaseConfig):
    """
    Production environment: strict settings, no debug output.

    The application factory calls ``validate_production_settings()``
    at startup and will refuse to launch without a real database.
    """

    DEBUG: bool = False
    SQLALCHEMY_ECHO: bool = False
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "WARNING")


# Lookup dict used by the application factory.
config_by_name: dict[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}
