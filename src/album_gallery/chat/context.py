from typing import Optional

from ..models import Album


def build_album_context(album: Optional[Album]) -> str:
    """Plain-text album summary sent as the ask context."""
    if album is None:
        return ""
    media_lines = "\n".join(
        f"{i + 1}. {item.type.value}" + (f":{item.src}" if item.src else "")
        for i, item in enumerate(album.media)
    )
    return "\n".join([
        f"Title: {album.title}",
        f"Description: {album.description}",
        f"Tags: {', '.join(album.tags)}",
        f"Media:\n{media_lines}",
    ])
