"""
Application configuration module.

This module defines configuration classes for different environments
(development, testing, production). Configuration values are loaded
from environment variables with sensible defaults.
"""

import os
from datetime import timedelta
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent


class Config:
    """Base configuration with default settings."""

    SECRET_KEY: str = os.environ.get("SECRET_KEY", "dev-secret-key-change-in-production")

    # "memory" keeps session records server-side, "cookie" uses Flask's signed cookie
    SESSION_BACKEND: str = os.environ.get("SESSION_BACKEND", "memory")
    PERMANENT_SESSION_LIFETIME: timedelta = timedelta(
        minutes=int(os.environ.get("SESSION_IDLE_MINUTES", "60"))
    )
    SESSION_COOKIE_HTTPONLY: bool = True
    SESSION_COOKIE_SAMESITE: str = os.environ.get("SESSION_COOKIE_SAMESITE", "Lax")
    SESSION_COOKIE_SECURE: bool = (
        os.environ.get("SESSION_COOKIE_SECURE", "false").strip().lower() == "true"
    )

    # Action (audit) log location
    LOG_DIR: str = os.environ.get("ACTION_LOG_DIR", str(BASE_DIR / "Logs"))
    LOG_FILE_NAME: str = os.environ.get("ACTION_LOG_FILE", "actions.log")

    THEME_COOKIE_SECURE: bool = (
        os.environ.get("THEME_COOKIE_SECURE", "false").strip().lower() == "true"
    )

    # Pipeline steps run before each entry point's handlers, in this order.
    # Every entry must be a subsequence of ("auth", "theme", "logging").
    PIPELINE_ENTRY_POINTS: dict = {
        "Auth": ("theme", "logging"),
        "Todo": ("auth", "theme", "logging"),
        "Theme": ("logging",),
    }


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG: bool = True
    TESTING: bool = False


class TestingConfig(Config):
    """Testing environment configuration."""

    DEBUG: bool = True
    TESTING: bool = True

    LOG_DIR: str = os.environ.get("TEST_ACTION_LOG_DIR", str(BASE_DIR / "instance" / "test_logs"))


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG: bool = False
    TESTING: bool = False
    SESSION_COOKIE_SECURE: bool = (
        os.environ.get("SESSION_COOKIE_SECURE", "true").strip().lower() == "true"
    )
    THEME_COOKIE_SECURE: bool = (
        os.environ.get("THEME_COOKIE_SECURE", "true").strip().lower() == "true"
    )


# Configuration mapping for easy access
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (development, testing, production).
             If None, uses FLASK_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("FLASK_ENV", "development")
    return config.get(env, config["default"])
