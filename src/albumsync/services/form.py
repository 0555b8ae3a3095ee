"""Create/edit form state and submission."""

import logging
from collections.abc import Awaitable, Callable

from albumsync.client import CatalogProtocol
from albumsync.exceptions import ValidationFailure
from albumsync.models.album import Album, EditBuffer
from albumsync.models.form import CreateMode, EditMode, FormMode

logger = logging.getLogger(__name__)

RefreshCallback = Callable[[], Awaitable[object]]


class FormController:
    """Owns the single edit buffer and the form mode.

    The form is either closed, open for a new album, or open for editing
    an existing album by id. Only a successful submit or `cancel()` closes
    it again; a failed submit leaves everything the user typed in place.

    Attributes:
        pending: True while a submit is waiting for the service. Further
            submits are ignored until it resolves.
    """

    def __init__(
        self,
        client: CatalogProtocol,
        on_saved: RefreshCallback | None = None,
    ) -> None:
        """Initialize a closed form in create mode.

        Args:
            client: Catalog client used to create or update albums.
            on_saved: Awaited after every successful submit, typically to
                re-issue the current listing.
        """
        self._client = client
        self._on_saved = on_saved
        self._buffer = EditBuffer()
        self._mode: FormMode = CreateMode()
        self._open = False
        self._session = 0
        self.pending = False

    @property
    def buffer(self) -> EditBuffer:
        return self._buffer

    @property
    def mode(self) -> FormMode:
        return self._mode

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def can_submit(self) -> bool:
        """True when the form is open, idle and has every required field."""
        return self._open and not self.pending and not self._buffer.missing_fields()

    def open_create(self) -> None:
        """Open an empty form for a new album.

        Ignored while the form is already open, so typed input is kept.
        """
        if self._open:
            logger.debug("Form already open in %s", type(self._mode).__name__)
            return
        self._reset()
        self._open = True

    def start_edit(self, record: Album) -> None:
        """Open the form on a copy of an existing album.

        The release date is reduced to its date part. Ignored while a
        submit is pending.
        """
        if self.pending:
            logger.debug("Edit of %s ignored: submit pending", record.id)
            return
        self._buffer = EditBuffer.from_album(record)
        self._mode = EditMode(album_id=record.id)
        self._open = True
        self._session += 1
        logger.debug("Editing album %s", record.id)

    def set_field(self, name: str, value: str) -> None:
        """Replace one buffer field.

        Args:
            name: Python or wire name of the field (e.g. `release_date` or
                `releaseDate`).
            value: Text as entered.

        Raises:
            ValueError: If name is not a form field.
        """
        self._buffer = self._buffer.with_field(name, value)

    def cancel(self) -> None:
        """Close the form and discard the buffer. No request is made."""
        self._reset()

    async def submit(self) -> Album | None:
        """Create or update the album described by the buffer.

        If the form was cancelled or reopened while the request was in
        flight, a successful save leaves the current form untouched.

        Returns:
            The saved album if the service returned one, otherwise None.
            Also None when ignored because the form is closed or a submit
            is already pending.

        Raises:
            ValidationFailure: If a required field is blank. Nothing is sent.
            NetworkFailure: If the service could not be reached.
            ServerFailure: If the service rejected the request.
        """
        if not self._open:
            logger.debug("Submit ignored: form is closed")
            return None
        if self.pending:
            logger.debug("Submit ignored: previous submit still pending")
            return None

        missing = self._buffer.missing_fields()
        if missing:
            raise ValidationFailure(missing)

        buffer, mode, session = self._buffer, self._mode, self._session
        self.pending = True
        try:
            match mode:
                case EditMode(album_id=album_id):
                    saved = await self._client.update(album_id, buffer)
                case CreateMode():
                    saved = await self._client.create(buffer)

            if session == self._session:
                self._reset()
            else:
                logger.debug("Form changed while saving; keeping current input")
            if self._on_saved is not None:
                await self._on_saved()
        finally:
            self.pending = False
        return saved

    def _reset(self) -> None:
        self._buffer = EditBuffer()
        self._mode = CreateMode()
        self._open = False
        self._session += 1
