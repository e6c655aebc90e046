"""Configuration management using pydantic-settings."""
import os

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import pytz


class Settings(BaseSettings):
    """Application settings."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    # Environment
    environment: str = Field(
        default_factory=lambda: os.getenv("ENVIRONMENT", "development"),
        description="Environment: development, staging, production"
    )
    
    # Database
    database_url: str = Field(
        "sqlite+aiosqlite:///./carwash.db",
        description="SQLAlchemy async connection URL"
    )
    database_pool_size: int = Field(10, description="Connection pool size")
    database_max_overflow: int = Field(20, description="Max overflow connections")
    
    # Application
    timezone: str = Field("Europe/Minsk", description="Business timezone for calendar days")
    currency: str = Field("BYN", description="Currency label used in messages and exports")
    debug: bool = Field(False, description="Debug mode")
    log_level: str = Field("INFO", description="Logging level")
    log_dir: str = Field("logs", description="Directory for rotating log files")
    
    # Dashboard widgets
    upcoming_appointments_limit: int = Field(5, description="Upcoming appointments shown on dashboard")
    popular_services_limit: int = Field(5, description="Top services shown on dashboard")
    
    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Reject timezone names pytz does not know."""
        try:
            pytz.timezone(v)
        except pytz.UnknownTimeZoneError:
            raise ValueError(f"Unknown timezone: {v}")
        return v
    
    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


# Global settings instance
settings = Settings()
