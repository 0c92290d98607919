import logging

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator


class Config(BaseSettings):
    # Command line defaults
    default_timezone: str = Field(default="UTC", alias="PERIODKIT_TIMEZONE")
    default_format: str = Field(default="RFC3339", alias="PERIODKIT_FORMAT")
    default_locale: str = Field(default="en", alias="PERIODKIT_LOCALE")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Normalize to an upper-case level name, unknown names become INFO."""
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            return "INFO"
        return level

    # Path to .env file (for loading env vars)
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Instantiate the settings
config = Config()
