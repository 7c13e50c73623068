"""
Configuration management via environment variables.

This module loads configuration from .env file using python-dotenv.
All configuration values are accessed through the Settings class.

Two stores are configured here:
1. A relational database (PostgreSQL) for tours, route plans and contacts
2. A document store (MongoDB) split into an admin and an employee database
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


# Load .env file from project root
# This must happen before accessing os.environ
PROJECT_ROOT = Path(__file__).parent.parent.parent
env_path = PROJECT_ROOT / ".env"
load_dotenv(env_path)


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    frozen=True makes the dataclass immutable, preventing accidental
    modification of settings at runtime.

    Attributes:
        app_name: Application identifier for logging
        app_env: Environment name (development, testing, production)
        log_level: Logging verbosity (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for daily log files
        database_url: PostgreSQL connection string
        mongodb_uri_admin: Connection string of the admin document store
        mongodb_db_admin: Admin database name
        mongodb_uri_employee: Connection string of the employee document store
        mongodb_db_employee: Employee database name
        google_api_key: API key for Google Gemini (primary LLM)
        groq_api_key: API key for Groq (fallback LLM)
        llm_model: Gemini model identifier
        llm_model_fallback: Groq model identifier
        llm_temperature: LLM creativity (0.0 = deterministic, 1.0 = creative)
        llm_max_tokens: Maximum response length
        upload_dir: Root directory for uploaded odometer photos
    """
    # Application settings
    app_name: str
    app_env: str
    log_level: str
    log_dir: str

    # Relational database
    database_url: str
    auto_init_db: bool

    # Document store
    mongodb_uri_admin: str
    mongodb_db_admin: str
    mongodb_uri_employee: str
    mongodb_db_employee: str

    # LLM settings
    google_api_key: str
    groq_api_key: str
    llm_model: str
    llm_model_fallback: str
    llm_temperature: float
    llm_max_tokens: int

    # Uploads
    upload_dir: str

    # Monitoring
    enable_audit_logging: bool

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.app_env.lower() == "development"

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env.lower() == "production"

    def same_mongo_cluster(self) -> bool:
        """True when admin and employee databases live on one cluster."""
        return self.mongodb_uri_admin == self.mongodb_uri_employee


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
    return _get_env(key, default).lower() in ("1", "true", "yes")


def build_database_url() -> str:
    """
    Resolve the relational database URL.

    Priority:
    1. DATABASE_URL (managed/cloud Postgres)
    2. POSTGRES_* components (local Postgres)
    """
    database_url = os.environ.get("DATABASE_URL")

    if not database_url:
        host = _get_env("POSTGRES_HOST", "localhost")
        port = _get_env("POSTGRES_PORT", "5432")
        name = _get_env("POSTGRES_DB", "tourjet_db")
        user = _get_env("POSTGRES_USER", "postgres")
        password = _get_env("POSTGRES_PASSWORD", "password")
        database_url = f"postgresql://{user}:{password}@{host}:{port}/{name}"

    # Heroku-style URLs use the legacy scheme SQLAlchemy no longer accepts
    if database_url.startswith("postgres://"):
        database_url = database_url.replace("postgres://", "postgresql://", 1)

    return database_url


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are read once; call get_settings.cache_clear() to reload
    (tests do this after changing the environment).

    Returns:
        Settings instance with all configuration values
    """
    shared_mongo_uri = _get_env("MONGODB_URI", "mongodb://localhost:27017")

    return Settings(
        # Application
        app_name=_get_env("APP_NAME", "FleetTourAPI"),
        app_env=_get_env("APP_ENV", "development"),
        log_level=_get_env("LOG_LEVEL", "INFO"),
        log_dir=_get_env("LOG_DIR", str(PROJECT_ROOT / "logs")),

        # Relational database
        database_url=build_database_url(),
        auto_init_db=_get_bool("AUTO_INIT_DB", "false"),

        # Document store
        mongodb_uri_admin=_get_env("MONGODB_URI_ADMIN", shared_mongo_uri),
        mongodb_db_admin=_get_env("MONGODB_DB_ADMIN", "admin_db"),
        mongodb_uri_employee=_get_env("MONGODB_URI_EMPLOYEE", shared_mongo_uri),
        mongodb_db_employee=_get_env("MONGODB_DB_EMPLOYEE", "emp_db"),

        # LLM
        google_api_key=_get_env("GOOGLE_API_KEY", ""),
        groq_api_key=_get_env("GROQ_API_KEY", ""),
        llm_model=_get_env("LLM_MODEL", "gemini-2.5-flash"),
        llm_model_fallback=_get_env("LLM_MODEL_FALLBACK", "llama-3.3-70b-versatile"),
        llm_temperature=float(_get_env("LLM_TEMPERATURE", "0.2")),
        llm_max_tokens=int(_get_env("LLM_MAX_TOKENS", "2048")),

        # Uploads
        upload_dir=_get_env("UPLOAD_DIR", str(PROJECT_ROOT / "uploads")),

        # Monitoring
        enable_audit_logging=_get_bool("ENABLE_AUDIT_LOGGING", "true"),
    )
