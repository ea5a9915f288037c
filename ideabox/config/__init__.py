"""
Configuration module.

Handles environment variables, storage selection, and application settings.
"""

from ideabox.config.config import (
    APP_ENV,
    DEBUG,
    LOG_LEVEL,
    IDEAS_STORAGE,
    IDEAS_DB_PATH,
    IDEAS_TABLE,
    AIRTABLE_API_KEY,
    AIRTABLE_BASE_ID,
    REQUEST_TIMEOUT,
    WEB_HOST,
    WEB_PORT,
    SECRET_KEY,
    STORAGE_BACKENDS,
    is_production,
    is_development,
    is_test,
    validate_config,
    configure_logging,
    print_config_summary,
)

__all__ = [
    "APP_ENV",
    "DEBUG",
    "LOG_LEVEL",
    "IDEAS_STORAGE",
    "IDEAS_DB_PATH",
    "IDEAS_TABLE",
    "AIRTABLE_API_KEY",
    "AIRTABLE_BASE_ID",
    "REQUEST_TIMEOUT",
    "WEB_HOST",
    "WEB_PORT",
    "SECRET_KEY",
    "STORAGE_BACKENDS",
    "is_production",
    "is_development",
    "is_test",
    "validate_config",
    "configure_logging",
    "print_config_summary",
]
