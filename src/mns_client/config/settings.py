"""
Module: settings.py
Description: Client configuration using pydantic-settings.

Loads endpoint, credentials and transport tuning from environment
variables prefixed with MNS_ (or a .env file for local development).
"""

import re

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_VERSION = "2015-06-06"


class Settings(BaseSettings):
    """MNS client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MNS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Endpoint and credentials
    endpoint: str = Field(
        ...,
        description="Service endpoint, e.g. http://<account>.mns.<region>.aliyuncs.com"
    )
    access_key_id: str = Field(
        ...,
        min_length=1,
        description="Access key id used in the Authorization header"
    )
    access_key_secret: SecretStr = Field(
        ...,
        description="Access key secret used as the HMAC key"
    )
    version: str = Field(
        default=DEFAULT_VERSION,
        description="Value sent in the x-mns-version header"
    )

    # Transport settings
    timeout: float = Field(
        default=35.0,
        gt=0,
        description="HTTP timeout in seconds; must exceed the longest long-poll wait"
    )
    keepalive_expiry: float = Field(
        default=8.0,
        ge=0,
        description="Seconds an idle pooled connection is kept alive"
    )
    max_workers: int = Field(
        default=4,
        ge=1,
        le=64,
        description="Worker threads used for callback-style dispatch"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Integrity
    content_md5: bool = Field(
        default=False,
        description="Send a Content-MD5 header for request bodies"
    )

    @field_validator('endpoint')
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        """Validate endpoint is an HTTP/HTTPS URL."""
        if not v or not isinstance(v, str):
            raise ValueError("endpoint must be a non-empty string")

        if not re.match(r'^https?://[^/\s]+', v):
            raise ValueError("endpoint must be a valid HTTP/HTTPS URL")

        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid logging level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {', '.join(valid_levels)}")
        return v.upper()

    @field_validator('version')
    @classmethod
    def validate_version(cls, v: str) -> str:
        """Validate the protocol version looks like a YYYY-MM-DD date."""
        if not re.match(r'^\d{4}-\d{2}-\d{2}$', v):
            raise ValueError("version must be formatted as YYYY-MM-DD")
        return v
