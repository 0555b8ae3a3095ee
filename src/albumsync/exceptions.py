"""Custom exceptions for albumsync.

All exceptions include an HTTP-like status_code attribute so a front end
(or a web adapter) can map them without inspecting the type.
"""

from collections.abc import Iterable


class CatalogError(Exception):
    """Base exception for albumsync.

    Attributes:
        status_code: HTTP status code best describing the failure.
    """

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NetworkFailure(CatalogError):
    """The request never reached the catalog service or never returned.

    Raised for connection errors, timeouts and any other transport-level
    failure where no HTTP response is available.
    """

    status_code: int = 503  # Service Unavailable


class ServerFailure(CatalogError):
    """The catalog service answered with a non-success status.

    Also raised when a listing response cannot be parsed as albums.

    Attributes:
        status: Status code of the response, if one was received.
    """

    status_code: int = 502  # Bad Gateway (upstream failure)

    def __init__(self, message: str, status: int | None = None) -> None:
        self.status = status
        super().__init__(message)


class ValidationFailure(CatalogError):
    """A required form field is empty.

    Raised before any network call is made.

    Attributes:
        missing: Wire names of the blank required fields.
    """

    status_code: int = 400  # Bad Request

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing = tuple(missing)
        super().__init__(f"Missing required fields: {', '.join(self.missing)}")
