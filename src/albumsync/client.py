"""Catalog service HTTP client."""

import logging
from typing import Any, Protocol
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from albumsync.config import ClientConfig
from albumsync.exceptions import NetworkFailure, ServerFailure
from albumsync.models.album import Album, EditBuffer
from albumsync.models.enums import SearchField
from albumsync.models.query import SearchQuery

logger = logging.getLogger(__name__)


class CatalogProtocol(Protocol):
    """Protocol for catalog service clients.

    This protocol enables dependency injection and testing.
    Implement this protocol to create fake catalogs for testing.
    """

    async def fetch_all(self) -> list[Album]:
        """Fetch every album."""
        ...

    async def search(self, field: SearchField, value: str) -> list[Album]:
        """Fetch albums whose `field` matches `value`."""
        ...

    async def create(self, buffer: EditBuffer) -> Album | None:
        """Add a new album."""
        ...

    async def update(self, album_id: str, buffer: EditBuffer) -> Album | None:
        """Replace the editable fields of an album."""
        ...

    async def delete(self, album_id: str) -> None:
        """Remove an album."""
        ...


class CatalogClient:
    """Production catalog service client.

    Wraps httpx with consistent error handling and response parsing.
    Implements CatalogProtocol for type safety. Every failure surfaces as
    NetworkFailure or ServerFailure; httpx exceptions never escape.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        http: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional client configuration. Uses defaults if not provided.
            http: Optional httpx client. Creates one if not provided; an
                injected client is not closed by `aclose()`.
        """
        self._config = config or ClientConfig()
        self._base_url = self._config.base_url.rstrip("/")
        if http is not None:
            self._http = http
            self._owns_http = False
        else:
            self._http = self._create_http()
            self._owns_http = True

    def _create_http(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self._config.timeout,
            headers={"User-Agent": self._config.user_agent},
            follow_redirects=True,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def __aenter__(self) -> "CatalogClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying httpx client if this instance created it."""
        if self._owns_http:
            await self._http.aclose()

    async def fetch_all(self) -> list[Album]:
        """Fetch every album.

        Returns:
            Albums in the order the service returned them.

        Raises:
            NetworkFailure: If no response was received.
            ServerFailure: If the service answered with an error or a
                body that is not a list of albums.
        """
        response = await self._request("GET", "/getall")
        return self._parse_albums(response)

    async def search(self, field: SearchField, value: str) -> list[Album]:
        """Fetch albums matching a single filter.

        The value is sent verbatim, including when empty; the service
        decides what an empty filter means.

        Raises:
            NetworkFailure: If no response was received.
            ServerFailure: If the service answered with an error or a
                body that is not a list of albums.
        """
        query = SearchQuery(field=SearchField(field), value=value)
        response = await self._request("GET", "/search", params=query.as_params())
        return self._parse_albums(response)

    async def create(self, buffer: EditBuffer) -> Album | None:
        """Add a new album from form values.

        Returns:
            The created album when the response body describes one,
            otherwise None.

        Raises:
            NetworkFailure: If no response was received.
            ServerFailure: If the service rejected the request.
        """
        response = await self._request("POST", "/add", json=buffer.to_payload())
        logger.info("Created album %r", buffer.title)
        return self._parse_saved(response)

    async def update(self, album_id: str, buffer: EditBuffer) -> Album | None:
        """Replace the editable fields of an album.

        The id only appears in the path; the body never carries it.

        Raises:
            ValueError: If album_id is empty.
            NetworkFailure: If no response was received.
            ServerFailure: If the service rejected the request.
        """
        path = self._album_path("update", album_id)
        response = await self._request("PUT", path, json=buffer.to_payload())
        logger.info("Updated album %s", album_id)
        return self._parse_saved(response)

    async def delete(self, album_id: str) -> None:
        """Remove an album.

        Raises:
            ValueError: If album_id is empty.
            NetworkFailure: If no response was received.
            ServerFailure: If the service rejected the request.
        """
        await self._request("DELETE", self._album_path("delete", album_id))
        logger.info("Deleted album %s", album_id)

    def _album_path(self, action: str, album_id: str) -> str:
        if not album_id or not album_id.strip():
            raise ValueError("album_id cannot be empty")
        return f"/{action}/{quote(album_id, safe='')}"

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = f"{self._base_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            response = await self._http.request(method, url, **kwargs)
        except httpx.RequestError as e:
            logger.warning("Request %s %s failed: %s", method, url, e)
            raise NetworkFailure(f"Could not reach catalog service: {e}") from e

        if not response.is_success:
            logger.warning(
                "Catalog service returned %d for %s %s",
                response.status_code,
                method,
                url,
            )
            raise ServerFailure(
                f"Catalog service returned {response.status_code}",
                status=response.status_code,
            )
        return response

    def _parse_albums(self, response: httpx.Response) -> list[Album]:
        try:
            data = response.json()
        except ValueError as e:
            raise ServerFailure(
                "Catalog service returned invalid JSON", status=response.status_code
            ) from e

        if not isinstance(data, list):
            raise ServerFailure(
                "Expected a list of albums", status=response.status_code
            )

        # Malformed records are skipped; the rest of the listing still applies
        albums: list[Album] = []
        for item in data:
            try:
                albums.append(Album.model_validate(item))
            except ValidationError as e:
                logger.warning("Skipping malformed album in response: %s", e)
        return albums

    def _parse_saved(self, response: httpx.Response) -> Album | None:
        try:
            return Album.model_validate(response.json())
        except (ValueError, ValidationError):
            # Response body is implementation-defined; accept anything
            logger.debug("Save response is not an album: %r", response.text[:200])
            return None
