"""Search query composition."""

import logging

from albumsync.models.enums import SearchField
from albumsync.models.query import SearchQuery

logger = logging.getLogger(__name__)


class QueryComposer:
    """Owns the single active search filter.

    Switching the filter field always discards the current text, so a
    request never carries a value typed for a different field.
    """

    def __init__(self, field: SearchField = SearchField.TITLE) -> None:
        self._query = SearchQuery(field=field)

    @property
    def active_field(self) -> SearchField:
        return self._query.field

    @property
    def value(self) -> str:
        return self._query.value

    def set_active_field(self, field: SearchField | str) -> None:
        """Select the filter field and clear the filter text.

        Raises:
            ValueError: If field is not a known search field.
        """
        self._query = self._query.with_field(SearchField(field))
        logger.debug("Search field set to %s", self._query.field)

    def set_value(self, text: str) -> None:
        """Replace the filter text for the active field."""
        self._query = self._query.with_value(text)

    def build_request(self) -> SearchQuery:
        """Return the current (field, value) pair, even if value is empty."""
        return self._query
