"""
Configuration module for Idea Board.

Loads environment variables from .env file and exposes them as typed configuration values.
Uses python-dotenv for loading and provides safe defaults where appropriate.
"""

import logging
import os
import re
from pathlib import Path
from dotenv import load_dotenv

# Load .env file from project root
# The .env file should be in the root directory (parent of ideabox/)
_project_root = Path(__file__).parent.parent.parent
_env_path = _project_root / ".env"
load_dotenv(_env_path)


# =============================================================================
# Application Environment
# =============================================================================

# Application environment: "development", "staging", "production" or "test"
# Default: "development" for safe local testing
APP_ENV: str = os.getenv("APP_ENV", "development")

# Enable debug mode for verbose logging (only in development)
DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

# Root log level; DEBUG=true lowers the default to DEBUG
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else "INFO").upper()


# =============================================================================
# Storage Configuration
# =============================================================================

# Which record store backs the ideas collection: "sqlite", "airtable" or "memory"
IDEAS_STORAGE: str = os.getenv("IDEAS_STORAGE", "sqlite").lower()

# SQLite database file. Tests get a private in-memory database so the
# persisted ideas are never touched.
IDEAS_DB_PATH: str = os.getenv(
    "IDEAS_DB_PATH",
    ":memory:" if APP_ENV == "test" else "ideas.db",
)

# Collection name; also the prefix of every idea id ("ideas:<key>")
IDEAS_TABLE: str = os.getenv("IDEAS_TABLE", "ideas")


# =============================================================================
# Airtable Configuration
# =============================================================================

# Airtable API key for authentication
# Only needed when IDEAS_STORAGE=airtable
AIRTABLE_API_KEY: str = os.getenv("AIRTABLE_API_KEY", "")

# Airtable base ID where the ideas table lives
AIRTABLE_BASE_ID: str = os.getenv("AIRTABLE_BASE_ID", "")

# HTTP request timeout in seconds
# Default: 30 seconds - generous timeout for slow APIs
REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "30"))


# =============================================================================
# Web Server Configuration
# =============================================================================

WEB_HOST: str = os.getenv("WEB_HOST", "127.0.0.1")

WEB_PORT: int = int(os.getenv("WEB_PORT", "5001"))

# Signs the session cookie that carries flash messages
SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret-change-in-production")


# =============================================================================
# Helper Functions
# =============================================================================

STORAGE_BACKENDS = ("sqlite", "airtable", "memory")

_TABLE_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def is_production() -> bool:
    """Check if running in production environment."""
    return APP_ENV == "production"


def is_development() -> bool:
    """Check if running in development environment."""
    return APP_ENV == "development"


def is_test() -> bool:
    """Check if running under the test environment."""
    return APP_ENV == "test"


def validate_config() -> list[str]:
    """
    Validate the current configuration.

    Returns:
        List of missing or invalid configuration keys (empty if all valid).
    """
    errors = []

    if IDEAS_STORAGE not in STORAGE_BACKENDS:
        errors.append(
            f"IDEAS_STORAGE must be one of {', '.join(STORAGE_BACKENDS)}, got {IDEAS_STORAGE!r}"
        )

    if IDEAS_STORAGE == "airtable":
        if not AIRTABLE_API_KEY:
            errors.append("AIRTABLE_API_KEY is required when IDEAS_STORAGE=airtable")
        if not AIRTABLE_BASE_ID:
            errors.append("AIRTABLE_BASE_ID is required when IDEAS_STORAGE=airtable")

    if not _TABLE_NAME_RE.match(IDEAS_TABLE):
        errors.append(f"IDEAS_TABLE must be a plain identifier, got {IDEAS_TABLE!r}")

    if is_production() and SECRET_KEY == "dev-secret-change-in-production":
        errors.append("SECRET_KEY must be set in production")

    if REQUEST_TIMEOUT < 1:
        errors.append("REQUEST_TIMEOUT must be at least 1 second")

    if not (0 < WEB_PORT < 65536):
        errors.append("WEB_PORT must be between 1 and 65535")

    return errors


def configure_logging(level: str = None) -> None:
    """Install a single stream handler on the root logger."""
    level = (level or LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        force=True,
    )


def print_config_summary() -> None:
    """Print a summary of current configuration (safe for logs, no secrets)."""
    print(f"  APP_ENV: {APP_ENV}")
    print(f"  DEBUG: {DEBUG}")
    print(f"  LOG_LEVEL: {LOG_LEVEL}")
    print(f"  IDEAS_STORAGE: {IDEAS_STORAGE}")
    print(f"  IDEAS_DB_PATH: {IDEAS_DB_PATH}")
    print(f"  IDEAS_TABLE: {IDEAS_TABLE}")
    print(f"  AIRTABLE_API_KEY: {'***' if AIRTABLE_API_KEY else '(not set)'}")
    print(f"  AIRTABLE_BASE_ID: {'***' if AIRTABLE_BASE_ID else '(not set)'}")
    print(f"  REQUEST_TIMEOUT: {REQUEST_TIMEOUT}s")
    print(f"  WEB_HOST: {WEB_HOST}")
    print(f"  WEB_PORT: {WEB_PORT}")
