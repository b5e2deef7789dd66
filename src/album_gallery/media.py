"""
Media helpers for thumbnails, YouTube embeds and carousel navigation.
"""
import json
from typing import Optional
from urllib.parse import urlparse, parse_qs, urlencode, urlunparse

from .models import MediaItem, MediaType

YOUTUBE_THUMB_URL = "https://img.youtube.com/vi/{video_id}/hqdefault.jpg"


def youtube_id(url: str) -> str:
    """
    Extract the video id from a YouTube embed, watch or share URL.

    :param url: e.g. https://www.youtube.com/embed/<id>, ...watch?v=<id>, https://youtu.be/<id>
    :return: Video id, or "" when none can be found
    """
    if not url:
        return ""
    try:
        parsed = urlparse(url)
    except ValueError:
        return ""

    if not parsed.scheme or not parsed.netloc:
        return ""

    if "youtu.be" in parsed.netloc:
        return parsed.path.lstrip("/").split("/")[0]

    video = parse_qs(parsed.query).get("v")
    if video and video[0]:
        return video[0]

    parts = parsed.path.split("/")
    if "embed" in parts:
        i = parts.index("embed")
        if i + 1 < len(parts) and parts[i + 1]:
            return parts[i + 1]

    return ""


def thumb_for(item: MediaItem, fallback: str = "") -> str:
    """
    Thumbnail URL for a media item.

    Images are their own thumbnail; YouTube videos use img.youtube.com;
    anything else (or a YouTube URL without an id) uses the fallback,
    normally the album cover.
    """
    if item.type == MediaType.IMAGE:
        return item.src
    if item.type == MediaType.YOUTUBE:
        video_id = youtube_id(item.src)
        return YOUTUBE_THUMB_URL.format(video_id=video_id) if video_id else fallback
    return fallback


def preview_src(item: MediaItem, fallback: str = "") -> str:
    return item.src if item.type == MediaType.IMAGE else thumb_for(item, fallback)


def youtube_player_url(src: str, origin: Optional[str] = None) -> str:
    """Embed URL with the JS API enabled, muted autoplay and no related videos."""
    parsed = urlparse(src)
    params = {key: values[-1] for key, values in parse_qs(parsed.query).items()}
    params.update({
        "enablejsapi": "1",
        "rel": "0",
        "modestbranding": "1",
        "autoplay": "1",
        "mute": "1",
    })
    if origin:
        params["origin"] = origin
    return urlunparse(parsed._replace(query=urlencode(params)))


def youtube_command(func: str) -> str:
    """postMessage payload for the YouTube iframe player API."""
    return json.dumps({"event": "command", "func": func, "args": []})


def wrap_index(index: int, delta: int, length: int) -> int:
    if length <= 0:
        return 0
    return (index + delta) % length
