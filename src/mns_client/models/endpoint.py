"""
Module: endpoint.py
Description: Credentials and endpoint identity held by a client.

Key Components:
- Credentials: Immutable access key pair; the secret never appears in repr
- Endpoint: Base URL, derived Host value and the mutable protocol version
"""

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from ..config.settings import DEFAULT_VERSION

_SCHEMES = ("http://", "https://")


class Credentials(BaseModel):
    """Access key pair used to sign every request."""

    model_config = ConfigDict(frozen=True)

    access_key_id: str = Field(..., min_length=1)
    access_key_secret: SecretStr

    @field_validator('access_key_secret')
    @classmethod
    def validate_secret(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value():
            raise ValueError("access_key_secret must be a non-empty string")
        return v


class Endpoint(BaseModel):
    """
    Where requests go and which protocol version they declare.

    Attributes:
        base_url: Service URL as configured, trailing slash removed
        version: Value of the x-mns-version header; may be changed at
            any time and applies to requests signed afterwards
    """

    model_config = ConfigDict(validate_assignment=True)

    base_url: str = Field(..., min_length=1)
    version: str = Field(default=DEFAULT_VERSION, min_length=1)

    @field_validator('base_url')
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v.startswith(_SCHEMES):
            raise ValueError("base_url must be a valid HTTP/HTTPS URL")
        return v.rstrip("/")

    @property
    def host(self) -> str:
        """base_url with its scheme stripped."""
        for scheme in _SCHEMES:
            if self.base_url.startswith(scheme):
                return self.base_url[len(scheme):]
        return self.base_url

    def url(self, resource: str) -> str:
        return f"{self.base_url}{resource}"
