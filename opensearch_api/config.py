"""Client configuration read from ``OPENSEARCH_*`` environment variables."""

import httpx
from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings

DEFAULT_URL = "http://localhost:9200"


class ClientConfig(BaseSettings):
    """Connection settings for the OpenSearch client.

    Every field can be overridden via constructor or an environment variable
    with the ``OPENSEARCH_`` prefix (``OPENSEARCH_URL``, ``OPENSEARCH_USERNAME``, ...).
    """

    url: str = Field(default=DEFAULT_URL, description="Cluster base URL")
    username: str | None = Field(default=None, description="Basic auth user name")
    password: SecretStr | None = Field(default=None, description="Basic auth password")

    # TLS
    verify_certs: bool = Field(default=True, description="Verify server certificates")
    ca_certs: str | None = Field(
        default=None, description="Path to a CA bundle used to verify the server"
    )

    # Timeouts (seconds)
    request_timeout: float = Field(default=30.0, description="HTTP request timeout")
    connect_timeout: float = Field(default=5.0, description="HTTP connection timeout")

    max_connections: int = Field(
        default=100, description="Maximum number of pooled connections"
    )
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Headers added to every request (per-request headers win)",
    )

    model_config = {"env_prefix": "OPENSEARCH_"}

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Trim trailing slashes and reject URLs without scheme or host."""
        v = v.strip().rstrip("/")
        try:
            parsed = httpx.URL(v)
        except httpx.InvalidURL as e:
            raise ValueError(f"invalid url {v!r}: {e}") from e
        if parsed.scheme not in ("http", "https"):
            raise ValueError(f"url must use http or https: {v!r}")
        if not parsed.host:
            raise ValueError(f"url has no host: {v!r}")
        return v
