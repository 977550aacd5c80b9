# Standard library imports
import os
from typing import Final, Optional
from dotenv import load_dotenv


class ConfigurationError(RuntimeError):
    """Raised when a required setting is missing."""


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    Values are read from the environment (and a local .env file). MONGO_URI and
    AUTH_KEY have no defaults; call validate() before serving requests.
    """

    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()

        # Database Configuration
        self.mongo_uri: Final[Optional[str]] = os.getenv("MONGO_URI")
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "mpocket")
        self.mongo_timeout_ms: Final[int] = int(
            os.getenv("MONGO_TIMEOUT_MS", "5000")
        )

        # Collection Names
        # "mpockets" is the pluralized name of the original "mpocket" model
        self.records_collection: Final[str] = os.getenv("RECORDS_COLLECTION", "mpockets")

        # Access Control
        self.auth_key: Final[Optional[str]] = os.getenv("AUTH_KEY")
        self.auth_header: Final[str] = os.getenv("AUTH_HEADER", "x-auth-key").lower()

        # Server Configuration
        self.port: Final[int] = int(os.getenv("PORT", "3000"))
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

    def validate(self) -> None:
        """
        Check that every required setting is present.

        Raises:
            ConfigurationError: If MONGO_URI or AUTH_KEY is missing
        """
        missing = [
            name
            for name, value in (("MONGO_URI", self.mongo_uri), ("AUTH_KEY", self.auth_key))
            if not value
        ]
        if missing:
            raise ConfigurationError(
                f"❌ {' or '.join(missing)} is missing. Please configure it in your .env file."
            )


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
