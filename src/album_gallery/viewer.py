"""
Overlay and lightbox view-model.

Holds the open album and viewer position explicitly instead of in module
globals. Operations that need an open album are logged no-ops without one.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .catalog import AlbumCatalog
from .media import thumb_for, preview_src, wrap_index, youtube_command, youtube_player_url
from .models import Album, MediaItem, MediaType

logger = logging.getLogger(__name__)

# Tiles from this index on are lazy-loaded.
EAGER_TILES = 2


@dataclass
class MediaTile:
    index: int
    thumb: str
    alt: str
    is_video: bool
    lazy: bool


@dataclass
class AlbumOverlay:
    album: Album
    hero_src: str
    hero_alt: str
    tiles: List[MediaTile]


class GalleryViewState:
    """State of the album overlay and the full-screen viewer."""

    def __init__(self, catalog: AlbumCatalog):
        self._catalog = catalog
        self.current_album: Optional[Album] = None
        self.current_index: int = 0
        self.viewer_open: bool = False

    def open_album(self, album_id: str, index: int = 0) -> Optional[AlbumOverlay]:
        """
        Open the overlay for an album.

        :param album_id: Album id
        :param index: Initial media index
        :return: AlbumOverlay render model, or None if the album is unknown
        """
        album = self._catalog.find(album_id)
        if album is None:
            logger.warning(f"open_album: unknown album '{album_id}'")
            return None

        self.current_album = album
        self.current_index = wrap_index(index, 0, len(album.media))
        self.viewer_open = False

        tiles = [
            MediaTile(
                index=i,
                thumb=thumb_for(item, album.cover),
                alt=f"{album.title} {i + 1}",
                is_video=item.type != MediaType.IMAGE,
                lazy=i >= EAGER_TILES,
            )
            for i, item in enumerate(album.media)
        ]
        return AlbumOverlay(
            album=album,
            hero_src=album.cover,
            hero_alt=f"{album.title} cover",
            tiles=tiles,
        )

    def close_album(self) -> None:
        self.close_viewer()
        self.current_album = None
        self.current_index = 0

    def open_viewer(self, index: int) -> Optional[MediaItem]:
        if not self._has_media("open_viewer"):
            return None
        self.current_index = wrap_index(index, 0, len(self.current_album.media))
        self.viewer_open = True
        return self.current_item

    def close_viewer(self) -> None:
        self._stop_player()
        self.viewer_open = False

    def nav(self, delta: int) -> Optional[MediaItem]:
        if not self._has_media("nav"):
            return None
        self._stop_player()
        self.current_index = wrap_index(self.current_index, delta, len(self.current_album.media))
        return self.current_item

    def next(self) -> Optional[MediaItem]:
        return self.nav(1)

    def previous(self) -> Optional[MediaItem]:
        return self.nav(-1)

    def swipe(self, dx: float, threshold: float = 40) -> Optional[MediaItem]:
        """Pointer swipe: left goes forward, right goes back, short drags are ignored."""
        if abs(dx) <= threshold:
            return self.current_item
        return self.nav(1 if dx < 0 else -1)

    @property
    def current_item(self) -> Optional[MediaItem]:
        if self.current_album is None or not self.current_album.media:
            return None
        return self.current_album.media[self.current_index]

    def peek(self) -> Tuple[str, str]:
        """Preview sources for the previous and next items."""
        if not self._has_media("peek"):
            return "", ""
        media = self.current_album.media
        n = len(media)
        cover = self.current_album.cover
        prev_item = media[wrap_index(self.current_index, -1, n)]
        next_item = media[wrap_index(self.current_index, 1, n)]
        return preview_src(prev_item, cover), preview_src(next_item, cover)

    def player_src(self, origin: Optional[str] = None) -> str:
        """
        Source to load in the viewer stage for the current item.

        YouTube embeds get the JS API and autoplay parameters; images and
        videos load their own src.
        """
        item = self.current_item
        if item is None:
            return ""
        if item.type == MediaType.YOUTUBE:
            return youtube_player_url(item.src, origin)
        return item.src

    def stop_command(self) -> Optional[str]:
        """postMessage payload that stops the current item, or None if it is not a YouTube embed."""
        item = self.current_item
        if not self.viewer_open or item is None or item.type != MediaType.YOUTUBE:
            return None
        return youtube_command("stopVideo")

    def _stop_player(self) -> None:
        command = self.stop_command()
        if command:
            logger.debug(f"player command: {command}")

    def _has_media(self, operation: str) -> bool:
        if self.current_album is None or not self.current_album.media:
            logger.warning(f"{operation}: no album open")
            return False
        return True
