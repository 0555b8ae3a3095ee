"""Tests for RecordStore."""

from albumsync.models.album import Album
from albumsync.services.store import RecordStore


class TestRecordStore:
    def test_starts_empty(self) -> None:
        store = RecordStore()
        assert store.records == ()
        assert len(store) == 0

    def test_replace_with_keeps_order(self, thriller: Album, rumours: Album) -> None:
        store = RecordStore()
        store.replace_with([rumours, thriller])
        assert store.records == (rumours, thriller)
        assert store.ids() == ["2", "1"]

    def test_replace_is_wholesale(self, thriller: Album, rumours: Album) -> None:
        store = RecordStore()
        store.replace_with([thriller, rumours])

        store.replace_with([rumours])

        assert list(store) == [rumours]

    def test_replace_snapshots_input(self, thriller: Album, rumours: Album) -> None:
        source = [thriller]
        store = RecordStore()
        store.replace_with(source)

        source.append(rumours)

        assert store.records == (thriller,)

    def test_clear(self, thriller: Album) -> None:
        store = RecordStore()
        store.replace_with([thriller])

        store.clear()

        assert len(store) == 0

    def test_get_and_contains(self, thriller: Album, rumours: Album) -> None:
        store = RecordStore()
        store.replace_with([thriller, rumours])

        assert store.get("2") == rumours
        assert store.get("missing") is None
        assert "1" in store
        assert "3" not in store
