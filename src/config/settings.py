"""Configuration settings for Career Compass."""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings have sensible defaults and can be overridden via
    environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Input files used by the CLI when no path is given
    profile_path: Path = Field(
        default=Path("profiles/profile.yaml"),
        description="Path to the user profile file (YAML/JSON)",
    )
    catalog_path: Path = Field(
        default=Path("data/catalog.yaml"),
        description="Path to the job/course catalog file (YAML/JSON)",
    )
    role_registry_path: Path | None = Field(
        default=None,
        description="Optional role-skill template file merged over the defaults",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @field_validator("role_registry_path", mode="before")
    @classmethod
    def empty_registry_path_is_none(cls, v: object) -> object:
        """Treat an empty ROLE_REGISTRY_PATH as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


# Singleton instance for easy import
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the application settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (useful for testing)."""
    global _settings
    _settings = None
