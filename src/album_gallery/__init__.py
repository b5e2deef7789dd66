"""
Album gallery service: portfolio album catalog, ask-the-album chat and an
LLM provider proxy with fallback and caption caching.
"""
from .app import AlbumGalleryApp
from .catalog import AlbumCatalog, DEFAULT_ALBUMS
from .config import GalleryConfig
from .models import Album, MediaItem, MediaType

__all__ = [
    "AlbumGalleryApp",
    "AlbumCatalog",
    "DEFAULT_ALBUMS",
    "GalleryConfig",
    "Album",
    "MediaItem",
    "MediaType",
]
