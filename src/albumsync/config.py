"""Configuration for albumsync."""

from dataclasses import dataclass

DEFAULT_API_URL = "https://project-2-rest-api.vercel.app/api"


@dataclass(frozen=True)
class ClientConfig:
    """Catalog service client configuration.

    Attributes:
        base_url: Origin plus the `/api` prefix, without a trailing slash.
        timeout: Request timeout in seconds.
        user_agent: Value of the User-Agent header.
    """

    base_url: str = DEFAULT_API_URL
    timeout: float = 10.0
    user_agent: str = "albumsync"
