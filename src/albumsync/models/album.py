"""Album record and form buffer models.

Album parses catalog service responses. EditBuffer holds the text the
create/edit form shows and produces request bodies from it.
"""

import math
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

__all__ = [
    "REQUIRED_FIELDS",
    "Album",
    "EditBuffer",
]

# Python field names of EditBuffer that must be non-blank before submit
REQUIRED_FIELDS = ("title", "artist", "genre", "release_date", "duration", "rating")


class CatalogModel(BaseModel):
    """Base model for catalog service payloads."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


class Album(CatalogModel):
    """One catalog entry as returned by the service."""

    id: str = Field(validation_alias=AliasChoices("_id", "id"))
    title: str
    artist: str
    genre: str
    release_date: str = Field(alias="releaseDate")
    duration: int | float
    country_of_origin: str | None = Field(default=None, alias="countryOfOrigin")
    rating: float

    @property
    def release_day(self) -> str:
        """Release date without its time part (YYYY-MM-DD)."""
        return self.release_date.split("T")[0]


class EditBuffer(CatalogModel):
    """Form values for creating or editing an album.

    Every field is the raw text the user entered. Instances are immutable;
    use `with_field` to derive an updated buffer.
    """

    title: str = ""
    artist: str = ""
    genre: str = ""
    release_date: str = Field(default="", alias="releaseDate")
    duration: str = ""
    country_of_origin: str = Field(default="", alias="countryOfOrigin")
    rating: str = ""

    @classmethod
    def from_album(cls, album: Album) -> "EditBuffer":
        """Copy every editable field of an album into a new buffer."""
        return cls(
            title=album.title,
            artist=album.artist,
            genre=album.genre,
            release_date=album.release_day,
            duration=f"{album.duration:g}",
            country_of_origin=album.country_of_origin or "",
            rating=f"{album.rating:g}",
        )

    @classmethod
    def resolve_field(cls, name: str) -> str:
        """Map a Python or wire field name to the Python field name.

        Raises:
            ValueError: If the name is not a buffer field.
        """
        for field_name, info in cls.model_fields.items():
            if name in (field_name, info.alias):
                return field_name
        raise ValueError(f"Unknown form field: {name}")

    def with_field(self, name: str, value: str) -> "EditBuffer":
        """Return a copy of this buffer with one field replaced."""
        return self.model_copy(update={self.resolve_field(name): value})

    def missing_fields(self) -> list[str]:
        """Wire names of required fields that are blank."""
        fields = type(self).model_fields
        return [
            fields[name].alias or name
            for name in REQUIRED_FIELDS
            if not getattr(self, name).strip()
        ]

    @property
    def is_empty(self) -> bool:
        return self == EditBuffer()

    def to_payload(self) -> dict[str, Any]:
        """Build the JSON request body using wire names.

        Duration and rating are sent as numbers when their text parses as
        one; otherwise the text is sent unchanged.
        """
        payload: dict[str, Any] = self.model_dump(by_alias=True)
        payload["duration"] = _as_number(self.duration)
        payload["rating"] = _as_number(self.rating)
        return payload


def _as_number(text: str) -> int | float | str:
    stripped = text.strip()
    try:
        return int(stripped)
    except ValueError:
        pass
    try:
        number = float(stripped)
    except ValueError:
        return text
    return number if math.isfinite(number) else text
