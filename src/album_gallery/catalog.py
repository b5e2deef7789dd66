"""
Static album catalog and search.
"""
import logging
from typing import Iterable, List, Optional

from .exceptions import AlbumNotFoundError
from .models import Album, MediaItem, MediaType
from .storage import AITagStore

logger = logging.getLogger(__name__)

POPULAR_TAGS = ["AAVSS", "dataset", "lidar", "night", "rain"]

DEFAULT_ALBUMS = (
    Album(
        id="aavss",
        title="Advanced Autonomous Vehicle Safety System",
        cover="https://res.cloudinary.com/dzrfpc9be/image/upload/v1755231573/IMG_8893_1_wtmgsn.jpg",
        description=(
            "Patent-pending AAVSS — multi-sensor fusion (LiDAR, radar, camera), "
            "embedded AI on Jetson Nano, and real-time driver safety analytics."
        ),
        tags=("AAVSS", "autonomous", "safety", "jetson", "embedded", "fusion"),
        media=(
            MediaItem(MediaType.IMAGE, "https://images.unsplash.com/photo-1503376780353-7e6692767b70?q=80&w=1600&auto=format&fit=crop"),
            MediaItem(MediaType.YOUTUBE, "https://www.youtube.com/embed/dQw4w9WgXcQ"),
            MediaItem(MediaType.IMAGE, "https://images.unsplash.com/photo-1558985040-ed4d5029c24c?q=80&w=1600&auto=format&fit=crop"),
        ),
    ),
    Album(
        id="dataset",
        title="Sri Lanka Autonomous Driving Dataset",
        cover="https://images.unsplash.com/photo-1524635962361-d7f8ae9c79b1?q=80&w=1600&auto=format&fit=crop",
        description=(
            "Open driving dataset across Sri Lankan road scenarios — urban, rural, "
            "rain/fog/night. Includes lane, sign and hazard annotations."
        ),
        tags=("dataset", "Sri Lanka", "traffic", "vision", "research"),
        media=(
            MediaItem(MediaType.IMAGE, "https://images.unsplash.com/photo-1483721310020-03333e577078?q=80&w=1600&auto=format&fit=crop"),
            MediaItem(MediaType.YOUTUBE, "https://www.youtube.com/embed/3JZ_D3ELwOQ"),
            MediaItem(MediaType.IMAGE, "https://images.unsplash.com/photo-1492144534655-ae79c964c9d7?q=80&w=1600&auto=format&fit=crop"),
        ),
    ),
)


class AlbumCatalog:
    """
    Read-only album list with substring search.

    Search matches the lowercased term against title, description and tags,
    and against AI tags from the tag store when one is attached.
    """

    def __init__(self, albums: Iterable[Album] = DEFAULT_ALBUMS, tag_store: Optional[AITagStore] = None):
        self._albums = tuple(albums)
        self._tag_store = tag_store

        ids = [album.id for album in self._albums]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Duplicate album ids in catalog: {ids}")

    def all(self) -> List[Album]:
        return list(self._albums)

    def find(self, album_id: str) -> Optional[Album]:
        for album in self._albums:
            if album.id == album_id:
                return album
        return None

    def get(self, album_id: str) -> Album:
        album = self.find(album_id)
        if album is None:
            raise AlbumNotFoundError(f"Unknown album: {album_id}")
        return album

    def ai_tags(self, album_id: str) -> List[str]:
        if self._tag_store is None:
            return []
        return self._tag_store.get(album_id)

    def filter(self, term: str = "") -> List[Album]:
        """
        Albums matching a search term, in catalog order.

        :param term: Free-text term; blank returns every album
        :return: Matching albums
        """
        t = (term or "").strip().lower()
        if not t:
            return self.all()

        results = []
        for album in self._albums:
            base = " ".join([album.title, album.description, " ".join(album.tags)]).lower()
            ai_tags = [tag.lower() for tag in self.ai_tags(album.id)]
            all_tags = " ".join(list(album.tags) + ai_tags).lower()
            if t in base or t in all_tags:
                results.append(album)

        logger.debug(f"Search '{t}' matched {len(results)} of {len(self._albums)} albums")
        return results
