"""
Configuration module for twirest.
Handles environment variables and library settings.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TwilioSettings(BaseSettings):
    """Twilio API conventions used while reading responses."""

    error_docs_url: str = Field(
        default="https://www.twilio.com/docs/errors",
        description="Base URL for error documentation links (<url>/<code>)",
    )
    audio_content_types: tuple[str, ...] = Field(
        default=("audio/",),
        description="Content-Type prefixes treated as binary recording audio",
    )

    model_config = SettingsConfigDict(
        env_prefix="TWIREST_TWILIO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


class DecoderSettings(BaseSettings):
    """XML decoder settings."""

    root_tag: str = Field(
        default="TwilioResponse", description="Envelope root element name"
    )
    normalize_exceptions: bool = Field(
        default=True,
        description="Run ExceptionResponse.parse() on decoded RestException records",
    )

    model_config = SettingsConfigDict(
        env_prefix="TWIREST_DECODER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


class APISettings(BaseSettings):
    """Runtime environment settings."""

    debug: bool = Field(default=False, description="Debug mode")
    environment: str = Field(
        default="development",
        description="Environment (development, staging, production)",
    )

    model_config = SettingsConfigDict(
        env_prefix="TWIREST_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


class LogSettings(BaseSettings):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")

    model_config = SettingsConfigDict(
        env_prefix="TWIREST_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


class Settings(BaseSettings):
    """Main library settings."""

    # Sub-settings
    twilio: TwilioSettings = Field(default_factory=TwilioSettings)
    decoder: DecoderSettings = Field(default_factory=DecoderSettings)
    api: APISettings = Field(default_factory=APISettings)
    log: LogSettings = Field(default_factory=LogSettings)

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )


# Global settings instance
settings = Settings()
