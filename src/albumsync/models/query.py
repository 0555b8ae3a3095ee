"""Search query and listing request models."""

from dataclasses import dataclass

from albumsync.models.enums import SearchField


@dataclass(frozen=True)
class SearchQuery:
    """A single active filter: one field and its text.

    Only the selected field can carry a value, so at most one filter is
    ever sent to the service.
    """

    field: SearchField = SearchField.TITLE
    value: str = ""

    def with_field(self, field: SearchField) -> "SearchQuery":
        """Switch the filter dimension, discarding the current text."""
        return SearchQuery(field=field)

    def with_value(self, value: str) -> "SearchQuery":
        return SearchQuery(field=self.field, value=value)

    def as_params(self) -> dict[str, str]:
        """Query string parameters for the `/search` endpoint."""
        return {self.field.value: self.value}


@dataclass(frozen=True)
class FullListing:
    """The UI last asked for every album."""


@dataclass(frozen=True)
class SearchListing:
    """The UI last asked for a filtered listing."""

    query: SearchQuery


Listing = FullListing | SearchListing
