# Standard library imports
import os
from typing import Final, Optional
from dotenv import find_dotenv, load_dotenv


class ConfigurationError(RuntimeError):
    """Raised when a required setting is missing or malformed."""


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got '{raw}'") from e


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got '{raw}'") from e


class Settings:
    """
    Application settings loaded from environment variables.

    Values come from the process environment, with a `.env` file in the
    working directory filling in anything not already set.
    """

    def __init__(self) -> None:
        # Load .env from the working directory upwards (never overrides real env)
        load_dotenv(find_dotenv(usecwd=True))

        # HTTP listener
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = _int_env("PORT", 5000)

        # Database Configuration
        # MONGO_URI has no default; startup fails without it.
        self.mongo_uri: Final[Optional[str]] = os.getenv("MONGO_URI") or None
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "users_api")
        self.mongo_server_selection_timeout_ms: Final[int] = _int_env(
            "MONGO_SERVER_SELECTION_TIMEOUT_MS", 5000
        )
        self.mongo_connect_retries: Final[int] = _int_env("MONGO_CONNECT_RETRIES", 0)
        self.mongo_connect_backoff_sec: Final[float] = _float_env(
            "MONGO_CONNECT_BACKOFF_SEC", 1.0
        )

        # Collection Names
        self.users_collection: Final[str] = os.getenv("USERS_COLLECTION", "users")

        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

        # Timezone used for createdAt stamps
        self.timezone: Final[str] = os.getenv("TIMEZONE", "UTC")

        if self.mongo_connect_retries < 0:
            raise ConfigurationError("MONGO_CONNECT_RETRIES cannot be negative")

    def require_mongo_uri(self) -> str:
        """
        Return the MongoDB connection string.

        Raises:
            ConfigurationError: If MONGO_URI is not set
        """
        if not self.mongo_uri:
            raise ConfigurationError("MONGO_URI not set. Please configure it in your .env file.")
        return self.mongo_uri


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
