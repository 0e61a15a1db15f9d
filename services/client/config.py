"""
Zendesk API Client Configuration
Credentials and host shared by every call issued through one client
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class ClientConfig(BaseModel):
    """
    Immutable client configuration.

    Args:
        email: Account email; combined with ``/token`` as the basic-auth user
        token: Zendesk API token
        host: Account host, e.g. ``https://acme.zendesk.com``
        timeout: Request timeout in seconds, ``None`` disables it
    """

    email: str
    token: str = Field(repr=False)
    host: str
    timeout: Optional[float] = None

    class Config:
        frozen = True

    @field_validator("host")
    @classmethod
    def normalize_host(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if value and "://" not in value:
            value = f"https://{value}"
        return value

    @property
    def username(self) -> str:
        """Basic-auth username for API token authentication"""
        return f"{self.email}/token"
