"""Enumerations for albumsync domain models."""

from enum import StrEnum


class SearchField(StrEnum):
    """Album attributes the catalog service can filter on.

    Values are the wire names used as the `/search` query parameter.
    """

    TITLE = "title"
    ARTIST = "artist"
    GENRE = "genre"
    RELEASE_DATE = "releaseDate"
    DURATION = "duration"
    RATING = "rating"
    COUNTRY_OF_ORIGIN = "countryOfOrigin"

    @property
    def label(self) -> str:
        """Human-readable label for display."""
        match self:
            case SearchField.TITLE:
                return "Title"
            case SearchField.ARTIST:
                return "Artist"
            case SearchField.GENRE:
                return "Genre"
            case SearchField.RELEASE_DATE:
                return "Release Date"
            case SearchField.DURATION:
                return "Duration (Min)"
            case SearchField.RATING:
                return "Rating"
            case SearchField.COUNTRY_OF_ORIGIN:
                return "Country"
