"""Synchronization controller between the album form, list and service.

CatalogController is the single entry point a front end talks to. It
wires the query composer, record store, form and UI flags together and is
the only place where one component's outcome triggers another's update.
"""

import logging

from albumsync.client import CatalogClient, CatalogProtocol
from albumsync.exceptions import CatalogError
from albumsync.models.album import Album
from albumsync.models.cancel import CancelToken
from albumsync.models.enums import SearchField
from albumsync.models.query import FullListing, Listing, SearchListing, SearchQuery
from albumsync.services.form import FormController
from albumsync.services.query import QueryComposer
from albumsync.services.store import RecordStore
from albumsync.services.ui_state import (
    DELETE_ERROR,
    FETCH_ERROR,
    SEARCH_ERROR,
    SUBMIT_ERROR,
    UIState,
    UIStateController,
)
from albumsync.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class CatalogController:
    """Keeps the displayed albums and UI flags in step with the service.

    Every listing request takes a new generation number. A response is
    applied only if its generation is still the latest and the controller
    has not been closed; otherwise it is dropped. Service failures are
    turned into the error banner here, and each operation returns whether
    it succeeded.

    Example:
        ```python
        async with CatalogController.from_settings() as catalog:
            await catalog.show_all()
            for album in catalog.records:
                print(album.title, album.release_day)
        ```
    """

    def __init__(
        self,
        client: CatalogProtocol,
        owned_client: CatalogClient | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            client: Catalog client for all service calls.
            owned_client: Client to close on `close()`. Pass it only when
                this controller created the client.
        """
        self._client = client
        self._owned_client = owned_client
        self._query = QueryComposer()
        self._store = RecordStore()
        self._form = FormController(client, on_saved=self.refresh)
        self._ui = UIStateController(lambda: self._form.is_open)
        self._last_listing: Listing = FullListing()
        self._generation = 0
        self._cancel_token = CancelToken()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "CatalogController":
        """Create a controller with its own client for the configured service."""
        settings = settings or get_settings()
        client = CatalogClient(settings.client_config())
        return cls(client, owned_client=client)

    async def __aenter__(self) -> "CatalogController":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    @property
    def records(self) -> tuple[Album, ...]:
        return self._store.records

    @property
    def store(self) -> RecordStore:
        return self._store

    @property
    def query(self) -> SearchQuery:
        return self._query.build_request()

    @property
    def form(self) -> FormController:
        return self._form

    @property
    def ui(self) -> UIStateController:
        return self._ui

    @property
    def last_listing(self) -> Listing:
        return self._last_listing

    @property
    def is_closed(self) -> bool:
        return self._cancel_token.is_cancelled

    def state(self) -> UIState:
        return self._ui.snapshot()

    # ============================================================================
    # LISTING
    # ============================================================================

    async def show_all(self) -> bool:
        """Replace the displayed albums with the full catalog."""
        return await self._run_listing(FullListing())

    async def search(self) -> bool:
        """Replace the displayed albums with those matching the filter."""
        return await self._run_listing(SearchListing(self._query.build_request()))

    async def refresh(self) -> bool:
        """Re-issue the listing the user last asked for."""
        return await self._run_listing(self._last_listing)

    def hide_all(self) -> None:
        """Empty the displayed list without contacting the service.

        A listing still in flight will not repopulate it.
        """
        self._ui.begin_operation()
        self._generation += 1
        self._store.clear()

    def select_search_field(self, field: SearchField | str) -> None:
        self._query.set_active_field(field)

    def set_search_value(self, text: str) -> None:
        self._query.set_value(text)

    async def _run_listing(self, listing: Listing) -> bool:
        if self.is_closed:
            logger.debug("Listing ignored: controller closed")
            return False

        self._last_listing = listing
        self._generation += 1
        generation = self._generation

        try:
            match listing:
                case SearchListing(query=query):
                    self._ui.begin_search()
                    albums = await self._client.search(query.field, query.value)
                case FullListing():
                    self._ui.begin_operation()
                    albums = await self._client.fetch_all()
        except CatalogError as e:
            if self._is_stale(generation):
                return False
            message = (
                SEARCH_ERROR if isinstance(listing, SearchListing) else FETCH_ERROR
            )
            self._ui.listing_failed(message, e)
            return False

        if self._is_stale(generation):
            logger.debug("Discarding stale listing (generation %d)", generation)
            return False

        self._store.replace_with(albums)
        if isinstance(listing, SearchListing):
            self._ui.search_succeeded(len(albums))
        else:
            self._ui.fetch_succeeded()
        logger.debug("Listing applied: %d album(s)", len(albums))
        return True

    def _is_stale(self, generation: int) -> bool:
        return self.is_closed or generation != self._generation

    # ============================================================================
    # FORM
    # ============================================================================

    def open_create(self) -> None:
        self._form.open_create()

    def start_edit(self, record: Album | str) -> None:
        """Open the form on an album or on the id of a displayed album.

        Raises:
            KeyError: If an id is given that is not in the store.
        """
        if isinstance(record, str):
            album = self._store.get(record)
            if album is None:
                raise KeyError(record)
            record = album
        self._form.start_edit(record)

    def set_form_field(self, name: str, value: str) -> None:
        self._form.set_field(name, value)

    def cancel_form(self) -> None:
        self._form.cancel()

    async def submit_form(self) -> bool:
        """Submit the form; on success the form closes and the list refreshes.

        Returns:
            True if the album was saved. False if the submit failed or was
            rejected locally. Also False when ignored because the form is
            not open or a submit is already pending.
        """
        if self.is_closed or not self._form.is_open or self._form.pending:
            return False

        self._ui.begin_operation()
        try:
            await self._form.submit()
        except CatalogError as e:
            if not self.is_closed:
                self._ui.report(SUBMIT_ERROR, e)
            return False
        return True

    # ============================================================================
    # DELETE
    # ============================================================================

    async def delete(self, album_id: str) -> bool:
        """Delete an album, then refresh the current listing.

        Raises:
            ValueError: If album_id is empty.
        """
        if not album_id or not album_id.strip():
            raise ValueError("album_id cannot be empty")
        if self.is_closed:
            return False

        self._ui.begin_operation()
        try:
            await self._client.delete(album_id)
        except CatalogError as e:
            if not self.is_closed:
                self._ui.report(DELETE_ERROR, e)
            return False

        await self.refresh()
        return True

    # ============================================================================
    # LIFECYCLE
    # ============================================================================

    async def close(self) -> None:
        """Tear down: late responses are discarded from now on."""
        self._cancel_token.cancel()
        if self._owned_client is not None:
            await self._owned_client.aclose()
            self._owned_client = None
