"""
Configuration management via environment variables.

This module loads configuration from .env file using python-dotenv.
All configuration values are accessed through the Settings class.

Why environment variables:
1. Flexibility - Different values per environment (dev/prod)
2. 12-factor app compliance - Configuration in environment
3. Easy override in tests and CI - No code changes needed
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


# Load .env file from project root
# This must happen before accessing os.environ
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)

DEFAULT_STATIC_INDEX = Path(__file__).parent.parent / "static" / "index.html"


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    frozen=True makes the dataclass immutable, preventing accidental
    modification of settings at runtime.

    Attributes:
        app_name: Application identifier for logging
        app_env: Environment name (development, production)
        log_level: Console logging verbosity (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for daily log files (None = project logs/)
        host: Bind address for the HTTP server
        port: Bind port for the HTTP server
        collection_path: Endpoint representing the whole set of people
        static_index_path: HTML page served for unmatched requests
        seed_sample_data: Start the store with the sample people
        enable_audit_logging: Log every request through AuditMiddleware
        enable_docs: Expose /docs, /redoc and /openapi.json
    """
    # Application settings
    app_name: str = "PeopleApi"
    app_env: str = "development"
    log_level: str = "INFO"
    log_dir: Optional[Path] = None

    # Server settings
    host: str = "127.0.0.1"
    port: int = 8000

    # API settings
    collection_path: str = "/api/users"
    static_index_path: Path = DEFAULT_STATIC_INDEX
    seed_sample_data: bool = True

    # Operational settings
    enable_audit_logging: bool = True
    enable_docs: bool = True

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.app_env.lower() == "development"

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env.lower() == "production"


def _get_env(key: str, default: Optional[str] = None) -> str:
    """
    Get environment variable with optional default.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value

    Raises:
        ValueError: If required variable is not set and no default provided
    """
    value = os.environ.get(key, default)
    if value is None:
        raise ValueError(
            f"Required environment variable '{key}' is not set. "
            f"Please check your .env file."
        )
    return value


def _get_bool(key: str, default: str) -> bool:
    return _get_env(key, default).strip().lower() in ("1", "true", "yes", "on")


def _get_int(key: str, default: str) -> int:
    raw = _get_env(key, default)
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Environment variable '{key}' must be an integer, got {raw!r}")


def _normalize_collection_path(path: str) -> str:
    """Validate the collection path and strip any trailing slash."""
    if not path.startswith("/"):
        raise ValueError(f"COLLECTION_PATH must start with '/', got {path!r}")
    path = path.rstrip("/")
    if not path:
        raise ValueError("COLLECTION_PATH cannot be the root path")
    return path


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Why lru_cache:
    - Settings are read once at startup
    - Avoids re-parsing the environment on every access
    - maxsize=1 ensures only one instance exists

    Call get_settings.cache_clear() after changing the environment
    (tests do this).

    Returns:
        Settings instance with all configuration values

    Raises:
        ValueError: If a variable has an invalid value
    """
    log_dir = os.environ.get("LOG_DIR")
    static_index = os.environ.get("STATIC_INDEX_PATH")

    return Settings(
        # Application
        app_name=_get_env("APP_NAME", "PeopleApi"),
        app_env=_get_env("APP_ENV", "development"),
        log_level=_get_env("LOG_LEVEL", "INFO"),
        log_dir=Path(log_dir) if log_dir else None,

        # Server
        host=_get_env("HOST", "127.0.0.1"),
        port=_get_int("PORT", "8000"),

        # API
        collection_path=_normalize_collection_path(_get_env("COLLECTION_PATH", "/api/users")),
        static_index_path=Path(static_index) if static_index else DEFAULT_STATIC_INDEX,
        seed_sample_data=_get_bool("SEED_SAMPLE_DATA", "true"),

        # Operational
        enable_audit_logging=_get_bool("ENABLE_AUDIT_LOGGING", "true"),
        enable_docs=_get_bool("ENABLE_DOCS", "true"),
    )
