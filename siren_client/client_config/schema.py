"""Pydantic schema for client configuration.

Configuration can be built in code or loaded from a YAML file:

    timeout: 10
    verify_ssl: true
    user_agent: my-app/1.0
    headers:
      Authorization: Bearer abc123

Usage:
    from siren_client.client_config import ClientConfig
    config = ClientConfig(timeout=10)
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..const import DEFAULT_ACCEPT, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT


class ClientConfig(BaseModel):
    """Settings shared by every request of one client."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, description="Total request timeout in seconds")
    verify_ssl: bool = Field(default=True, description="Verify TLS certificates")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent header value")
    accept: list[str] = Field(
        default_factory=lambda: list(DEFAULT_ACCEPT),
        description="Media types sent in the Accept header",
    )
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Extra headers sent with every request",
    )

    @field_validator("accept")
    @classmethod
    def _accept_not_empty(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("accept must list at least one media type")
        return value

    def default_headers(self) -> dict[str, str]:
        """Headers added to every request; request-specific headers take precedence."""
        headers = {
            "accept": ", ".join(self.accept),
            "user-agent": self.user_agent,
        }
        for name, value in self.headers.items():
            headers[name.lower()] = value
        return headers
