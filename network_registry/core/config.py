# Standard library imports
import os
from typing import Final, List, Optional
from dotenv import load_dotenv


# Minimum accepted length for the JWT signing secret
MIN_JWT_SECRET_LENGTH: Final[int] = 32


class ConfigurationError(Exception):
    """Raised when the loaded settings cannot be used to start the service."""


def _split_csv(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """
    
    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()
        
        # Server Configuration
        self.host: Final[str] = os.getenv("APP_HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("APP_PORT", "8080"))
        self.allowed_origins: Final[List[str]] = _split_csv(os.getenv("ALLOWED_ORIGINS"))
        
        # Timezone Configuration
        # Default to UTC, but can be set via TIMEZONE env var (e.g., "UTC", "Europe/Berlin")
        self.timezone: Final[str] = os.getenv("TIMEZONE", "UTC")
        
        # Logging Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")
        
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "network_registry")
        self.mongo_min_pool_size: Final[int] = int(os.getenv("MONGO_MIN_POOL_SIZE", "1"))
        self.mongo_max_pool_size: Final[int] = int(os.getenv("MONGO_MAX_POOL_SIZE", "10"))
        
        # Collection Names
        self.networks_collection: Final[str] = os.getenv("NETWORKS_COLLECTION", "networks")
        
        # JWT Configuration
        self.jwt_secret: Final[str] = os.getenv("JWT_SECRET", "")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.jwt_leeway_seconds: Final[int] = int(os.getenv("JWT_LEEWAY_SECONDS", "60"))
    
    def validate(self) -> None:
        """
        Check settings that must hold before the service starts.
        
        Raises:
            ConfigurationError: If the JWT secret is missing or too short,
                the Mongo URI is empty, or the pool bounds are inverted
        """
        if not self.jwt_secret:
            raise ConfigurationError("JWT secret is required. Set the JWT_SECRET environment variable")
        if len(self.jwt_secret) < MIN_JWT_SECRET_LENGTH:
            raise ConfigurationError(
                f"JWT secret must be at least {MIN_JWT_SECRET_LENGTH} characters. "
                f"Current length: {len(self.jwt_secret)}"
            )
        if not self.mongo_uri:
            raise ConfigurationError("Database URI is required. Set the MONGO_URI environment variable")
        if self.mongo_min_pool_size > self.mongo_max_pool_size:
            raise ConfigurationError(
                f"MONGO_MIN_POOL_SIZE ({self.mongo_min_pool_size}) cannot exceed "
                f"MONGO_MAX_POOL_SIZE ({self.mongo_max_pool_size})"
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


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
