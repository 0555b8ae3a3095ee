"""Client-side copy of the last successful album listing."""

from collections.abc import Iterable, Iterator

from albumsync.models.album import Album


class RecordStore:
    """Holds the albums currently displayed.

    The held sequence is only ever replaced as a whole, never merged, so it
    always equals either the last successful listing or an explicit clear.
    """

    def __init__(self) -> None:
        self._records: tuple[Album, ...] = ()

    @property
    def records(self) -> tuple[Album, ...]:
        return self._records

    def replace_with(self, records: Iterable[Album]) -> None:
        """Replace the held albums with a new listing."""
        self._records = tuple(records)

    def clear(self) -> None:
        """Empty the store without contacting the service."""
        self._records = ()

    def get(self, album_id: str) -> Album | None:
        """Return the held album with this id, or None."""
        for album in self._records:
            if album.id == album_id:
                return album
        return None

    def ids(self) -> list[str]:
        return [album.id for album in self._records]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Album]:
        return iter(self._records)

    def __contains__(self, album_id: object) -> bool:
        return any(album.id == album_id for album in self._records)
