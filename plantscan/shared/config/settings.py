# 📄 File: plantscan/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# The main configuration center that reads all settings (API keys, service addresses,
# timeouts) from environment variables and hands them to the rest of the plant scanner.
#
# 🧪 Purpose (Technical Summary):
# Pydantic-based settings management with environment variable loading,
# validation, and type safety for all application configuration parameters.
#
# 🔗 Dependencies:
# - pydantic-settings for configuration management
# - python-dotenv (through pydantic-settings) for .env file loading
#
# 🔄 Connected Modules / Calls From:
# - plantscan.main (application startup)
# - External API clients (Plant.id, Perenual, Wikipedia, geolocation)
# - Scan controller (credential checks at identification time)

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses Pydantic for validation and type safety. Settings are loaded
    from environment variables with fallback to .env file. Service
    credentials are optional; their absence is reported
    when the user asks for an identification, not at launch.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================

    APP_NAME: str = Field(default="PlantScan", description="Application name")
    APP_VERSION: str = Field(default="1.0.0", description="Application version")
    APP_DESCRIPTION: str = Field(
        default="Plant identification with a bilingual care guide",
        description="Application description"
    )
    ENVIRONMENT: str = Field(default="development", description="Runtime environment")
    DEBUG: bool = Field(default=True, description="Debug mode flag")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="json", description="Log format: json or text")

    # =========================================================================
    # SERVER CONFIGURATION
    # =========================================================================

    HOST: str = Field(default="0.0.0.0", description="Server host")
    PORT: int = Field(default=8000, description="Server port")
    RELOAD: bool = Field(default=True, description="Auto-reload on changes")

    # =========================================================================
    # PLANT IDENTIFICATION API
    # =========================================================================

    # Plant.id (Kindwise)
    PLANT_ID_API_KEY: Optional[str] = Field(None, description="Plant.id API key")
    PLANT_ID_API_URL: str = Field(
        default="https://api.plant.id/v3/identification",
        description="Plant.id identification endpoint"
    )
    PLANT_ID_DETAILS: str = Field(
        default="common_names,url,description,watering",
        description="Detail fields requested for every suggestion"
    )

    # =========================================================================
    # CARE & ENCYCLOPEDIA APIs
    # =========================================================================

    # Perenual
    PERENUAL_API_KEY: Optional[str] = Field(None, description="Perenual API key")
    PERENUAL_API_URL: str = Field(
        default="https://perenual.com/api",
        description="Perenual API base URL"
    )

    # Wikipedia REST (host selects the content language)
    WIKIPEDIA_URL_TEMPLATE: str = Field(
        default="https://{lang}.wikipedia.org/api/rest_v1",
        description="Wikipedia REST base URL; {lang} is replaced by the content language"
    )

    EXTERNAL_API_TIMEOUT: int = Field(default=30, description="Transport timeout for external calls (seconds)")

    # =========================================================================
    # GEOLOCATION
    # =========================================================================

    GEO_LATITUDE: Optional[float] = Field(None, description="Fixed latitude hint")
    GEO_LONGITUDE: Optional[float] = Field(None, description="Fixed longitude hint")
    GEO_PROBE_ENABLED: bool = Field(default=True, description="Probe IP geolocation at startup")
    GEO_PROBE_URL: str = Field(default="http://ip-api.com/json", description="IP geolocation endpoint")
    GEO_PROBE_TIMEOUT: float = Field(default=5.0, description="Geolocation probe timeout (seconds)")

    # =========================================================================
    # LOCALIZATION & UPLOADS
    # =========================================================================

    DEFAULT_LOCALE: str = Field(default="he", description="Locale active at startup")
    MAX_IMAGE_SIZE: int = Field(default=10485760, description="Max image size (10MB)")

    # =========================================================================
    # VALIDATORS
    # =========================================================================

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed_environments = ["development", "staging", "production", "test"]
        if v.lower() not in allowed_environments:
            raise ValueError(f"Environment must be one of {allowed_environments}")
        return v.lower()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level value."""
        allowed_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed_levels:
            raise ValueError(f"Log level must be one of {allowed_levels}")
        return v.upper()

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v.lower() not in ("json", "text"):
            raise ValueError("Log format must be 'json' or 'text'")
        return v.lower()

    @field_validator("DEFAULT_LOCALE")
    @classmethod
    def validate_default_locale(cls, v: str) -> str:
        """Validate the startup locale against the supported pair."""
        if v not in ("he", "ar"):
            raise ValueError("Default locale must be 'he' or 'ar'")
        return v

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================

    @property
    def has_credentials(self) -> bool:
        """Both service keys are required before an identification may start."""
        return bool(self.PLANT_ID_API_KEY) and bool(self.PERENUAL_API_KEY)

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.ENVIRONMENT == "development"


# ============================================================================
# SETTINGS FACTORY
# ============================================================================

@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Uses lru_cache to ensure settings are loaded only once
    and reused throughout the application lifecycle.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
