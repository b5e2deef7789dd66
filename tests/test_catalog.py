"""
Tests for album catalog and search.
"""
import pytest

from album_gallery.catalog import AlbumCatalog, DEFAULT_ALBUMS
from album_gallery.exceptions import AlbumNotFoundError
from album_gallery.models import Album, MediaItem, MediaType
from album_gallery.storage import AITagStore, MemoryStorage


@pytest.fixture
def tag_store():
    return AITagStore(MemoryStorage())


@pytest.fixture
def catalog(tag_store):
    return AlbumCatalog(tag_store=tag_store)


class TestAlbumLookup:
    """Tests for find/get."""

    def test_find_known_album(self, catalog):
        album = catalog.find("aavss")
        assert album is not None
        assert album.title == "Advanced Autonomous Vehicle Safety System"

    def test_find_unknown_album_returns_none(self, catalog):
        assert catalog.find("missing") is None

    def test_get_unknown_album_raises(self, catalog):
        with pytest.raises(AlbumNotFoundError):
            catalog.get("missing")

    def test_duplicate_ids_rejected(self):
        album = DEFAULT_ALBUMS[0]
        with pytest.raises(ValueError, match="Duplicate"):
            AlbumCatalog([album, album])

    def test_has_video(self, catalog):
        assert catalog.get("aavss").has_video
        photo_only = Album("p", "Photos", "c.jpg", "d", (), (MediaItem(MediaType.IMAGE, "a.jpg"),))
        assert not photo_only.has_video


class TestFilter:
    """Tests for substring search."""

    def test_blank_term_returns_all(self, catalog):
        assert catalog.filter("") == catalog.all()
        assert catalog.filter("   ") == catalog.all()

    @pytest.mark.parametrize("album", DEFAULT_ALBUMS, ids=lambda a: a.id)
    def test_title_search_includes_album(self, catalog, album):
        assert album in catalog.filter(album.title)

    def test_case_insensitive(self, catalog):
        ids = [a.id for a in catalog.filter("JETSON")]
        assert ids == ["aavss"]

    def test_matches_description(self, catalog):
        ids = [a.id for a in catalog.filter("hazard annotations")]
        assert ids == ["dataset"]

    def test_matches_static_tag(self, catalog):
        ids = [a.id for a in catalog.filter("sri lanka")]
        assert ids == ["dataset"]

    def test_no_match(self, catalog):
        assert catalog.filter("underwater basket weaving") == []

    def test_matches_ai_tags(self, catalog, tag_store):
        assert catalog.filter("motorway") == []
        tag_store.set("aavss", ["Motorway", "dashboard"])
        assert [a.id for a in catalog.filter("motorway")] == ["aavss"]

    def test_without_tag_store(self):
        catalog = AlbumCatalog()
        assert [a.id for a in catalog.filter("fusion")] == ["aavss"]
