"""Test fixtures and configuration.

This module provides shared fixtures organized into:
- Payload fixtures: Raw service responses
- Model fixtures: Parsed albums and buffers
- Fake catalog: In-memory CatalogProtocol implementation
"""

from typing import Any

import pytest
from albumsync.controller import CatalogController
from albumsync.exceptions import CatalogError, ServerFailure
from albumsync.models.album import Album, EditBuffer
from albumsync.models.enums import SearchField

# =============================================================================
# Payload Fixtures
# =============================================================================


def thriller_payload() -> dict[str, Any]:
    return {
        "_id": "1",
        "title": "Thriller",
        "artist": "Michael Jackson",
        "genre": "Pop",
        "releaseDate": "1982-11-30T00:00:00Z",
        "duration": 42,
        "countryOfOrigin": "US",
        "rating": 10,
        "__v": 0,
    }


def rumours_payload() -> dict[str, Any]:
    return {
        "_id": "2",
        "title": "Rumours",
        "artist": "Fleetwood Mac",
        "genre": "Rock",
        "releaseDate": "1977-02-04T00:00:00.000Z",
        "duration": 39,
        "countryOfOrigin": "UK",
        "rating": 9.5,
    }


@pytest.fixture
def thriller() -> Album:
    """Create the Thriller album."""
    return Album.model_validate(thriller_payload())


@pytest.fixture
def rumours() -> Album:
    """Create the Rumours album."""
    return Album.model_validate(rumours_payload())


@pytest.fixture
def complete_buffer() -> EditBuffer:
    """Create a buffer with every required field filled."""
    return EditBuffer(
        title="Bad",
        artist="Michael Jackson",
        genre="Pop",
        release_date="1987-08-31",
        duration="48",
        rating="8",
    )


# =============================================================================
# Fake Catalog
# =============================================================================


class FakeCatalog:
    """In-memory catalog implementing CatalogProtocol.

    Records every call in `calls`. Put an exception in `failures` under an
    operation name to make the next call to that operation raise it.
    """

    def __init__(self, payloads: list[dict[str, Any]] | None = None) -> None:
        self.payloads: dict[str, dict[str, Any]] = {
            p["_id"]: dict(p) for p in payloads or []
        }
        self.calls: list[tuple[Any, ...]] = []
        self.failures: dict[str, CatalogError] = {}
        self._next_id = 100

    def _maybe_fail(self, operation: str) -> None:
        error = self.failures.pop(operation, None)
        if error is not None:
            raise error

    def _albums(self) -> list[Album]:
        return [Album.model_validate(p) for p in self.payloads.values()]

    async def fetch_all(self) -> list[Album]:
        self.calls.append(("fetch_all",))
        self._maybe_fail("fetch_all")
        return self._albums()

    async def search(self, field: SearchField, value: str) -> list[Album]:
        self.calls.append(("search", SearchField(field), value))
        self._maybe_fail("search")
        needle = value.lower()
        return [
            Album.model_validate(p)
            for p in self.payloads.values()
            if needle in str(p.get(SearchField(field).value, "")).lower()
        ]

    async def create(self, buffer: EditBuffer) -> Album | None:
        self.calls.append(("create", buffer))
        self._maybe_fail("create")
        album_id = str(self._next_id)
        self._next_id += 1
        self.payloads[album_id] = {"_id": album_id, **buffer.to_payload()}
        return Album.model_validate(self.payloads[album_id])

    async def update(self, album_id: str, buffer: EditBuffer) -> Album | None:
        self.calls.append(("update", album_id, buffer))
        self._maybe_fail("update")
        if album_id not in self.payloads:
            raise ServerFailure("Not found", status=404)
        self.payloads[album_id].update(buffer.to_payload())
        return Album.model_validate(self.payloads[album_id])

    async def delete(self, album_id: str) -> None:
        self.calls.append(("delete", album_id))
        self._maybe_fail("delete")
        if self.payloads.pop(album_id, None) is None:
            raise ServerFailure("Not found", status=404)

    def operations(self) -> list[str]:
        """Names of the operations called so far, in order."""
        return [call[0] for call in self.calls]


@pytest.fixture
def fake_catalog() -> FakeCatalog:
    """Create a fake catalog holding Thriller and Rumours."""
    return FakeCatalog([thriller_payload(), rumours_payload()])


@pytest.fixture
def controller(fake_catalog: FakeCatalog) -> CatalogController:
    """Create a controller backed by the fake catalog."""
    return CatalogController(fake_catalog)


@pytest.fixture
def thriller_catalog() -> FakeCatalog:
    """Create a fake catalog holding only Thriller."""
    return FakeCatalog([thriller_payload()])


@pytest.fixture
def empty_catalog() -> FakeCatalog:
    """Create a fake catalog with no albums."""
    return FakeCatalog()
