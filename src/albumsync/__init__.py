"""albumsync - Browse and edit a remote music album catalog.

This library provides the client-side controller behind an album catalog
front end: it composes search requests, keeps a local list consistent
with the last successful service response, and drives a single create/edit
form. Rendering is left to the caller, which reads the controller's state
and forwards user input into it.

Examples:
    List and search albums:
    ```python
    from albumsync import create_controller

    async with create_controller() as catalog:
        await catalog.show_all()
        catalog.select_search_field("genre")
        catalog.set_search_value("Pop")
        await catalog.search()
        if catalog.state().no_results:
            print("No albums match your search criteria.")
    ```

    Edit an album:
    ```python
    catalog.start_edit("1")
    catalog.set_form_field("rating", "9")
    await catalog.submit_form()
    ```
"""

from albumsync.client import CatalogClient, CatalogProtocol
from albumsync.config import ClientConfig
from albumsync.controller import CatalogController
from albumsync.exceptions import (
    CatalogError,
    NetworkFailure,
    ServerFailure,
    ValidationFailure,
)
from albumsync.models import (
    Album,
    CancelToken,
    CreateMode,
    EditBuffer,
    EditMode,
    SearchField,
    SearchQuery,
)
from albumsync.services import UIState
from albumsync.settings import Settings, get_settings


def create_controller(settings: Settings | None = None) -> CatalogController:
    """Create a controller for the configured catalog service.

    This is the recommended way to create a controller for library usage.
    The controller owns its HTTP client and closes it on `close()`.

    Args:
        settings: Optional settings. Reads ALBUMSYNC_* environment
            variables (and .env) if not provided.

    Returns:
        A CatalogController with an empty store and a closed form.
    """
    return CatalogController.from_settings(settings)


__all__ = [
    "Album",
    "CancelToken",
    "CatalogClient",
    "CatalogController",
    "CatalogError",
    "CatalogProtocol",
    "ClientConfig",
    "CreateMode",
    "EditBuffer",
    "EditMode",
    "NetworkFailure",
    "SearchField",
    "SearchQuery",
    "ServerFailure",
    "Settings",
    "UIState",
    "ValidationFailure",
    "create_controller",
    "get_settings",
]
