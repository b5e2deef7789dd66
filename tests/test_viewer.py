"""
Tests for the overlay/viewer view-model.
"""
import pytest

from album_gallery.catalog import AlbumCatalog
from album_gallery.models import MediaType
from album_gallery.viewer import GalleryViewState


@pytest.fixture
def view():
    return GalleryViewState(AlbumCatalog())


class TestOverlay:
    """Tests for opening and closing albums."""

    def test_open_album_builds_tiles(self, view):
        overlay = view.open_album("aavss")

        assert overlay is not None
        assert overlay.hero_src == overlay.album.cover
        assert overlay.hero_alt.endswith("cover")
        assert len(overlay.tiles) == 3
        assert [t.is_video for t in overlay.tiles] == [False, True, False]
        assert [t.lazy for t in overlay.tiles] == [False, False, True]
        assert "img.youtube.com" in overlay.tiles[1].thumb

    def test_open_unknown_album(self, view):
        assert view.open_album("missing") is None
        assert view.current_album is None

    def test_close_album(self, view):
        view.open_album("aavss")
        view.open_viewer(1)
        view.close_album()

        assert view.current_album is None
        assert not view.viewer_open


class TestViewerNavigation:
    """Tests for lightbox navigation."""

    def test_open_viewer(self, view):
        view.open_album("dataset")
        item = view.open_viewer(1)

        assert view.viewer_open
        assert item.type == MediaType.YOUTUBE

    def test_next_and_previous_wrap(self, view):
        view.open_album("aavss")
        view.open_viewer(2)

        view.next()
        assert view.current_index == 0
        view.previous()
        assert view.current_index == 2

    def test_swipe(self, view):
        view.open_album("aavss")
        view.open_viewer(0)

        view.swipe(-100)
        assert view.current_index == 1
        view.swipe(100)
        assert view.current_index == 0
        view.swipe(10)
        assert view.current_index == 0

    def test_peek(self, view):
        overlay = view.open_album("aavss")
        view.open_viewer(0)
        prev_src, next_src = view.peek()

        assert prev_src == overlay.album.media[2].src
        assert "img.youtube.com" in next_src

    def test_operations_without_album_are_noops(self, view):
        assert view.open_viewer(0) is None
        assert view.next() is None
        assert view.peek() == ("", "")
        assert not view.viewer_open


class TestPlayer:
    """Tests for the viewer stage source and YouTube player commands."""

    def test_player_src_for_youtube(self, view):
        view.open_album("aavss")
        view.open_viewer(1)

        src = view.player_src(origin="https://site.dev")

        assert src.startswith("https://www.youtube.com/embed/dQw4w9WgXcQ?")
        assert "enablejsapi=1" in src
        assert "origin=https%3A%2F%2Fsite.dev" in src

    def test_player_src_for_image(self, view):
        overlay = view.open_album("aavss")
        view.open_viewer(0)
        assert view.player_src() == overlay.album.media[0].src

    def test_stop_command_only_for_open_youtube(self, view):
        view.open_album("aavss")
        view.open_viewer(1)

        assert view.stop_command() == '{"event": "command", "func": "stopVideo", "args": []}'
        view.next()
        assert view.stop_command() is None

    def test_player_src_without_album(self, view):
        assert view.player_src() == ""
        assert view.stop_command() is None
