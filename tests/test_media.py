"""
Tests for media helpers.
"""
import json

import pytest

from album_gallery.media import (
    youtube_id,
    thumb_for,
    preview_src,
    youtube_player_url,
    youtube_command,
    wrap_index,
)
from album_gallery.models import MediaItem, MediaType

COVER = "https://example.com/cover.jpg"


class TestYoutubeId:
    """Tests for YouTube id extraction."""

    @pytest.mark.parametrize("url", [
        "https://www.youtube.com/embed/dQw4w9WgXcQ",
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://youtu.be/dQw4w9WgXcQ",
        "https://www.youtube.com/embed/dQw4w9WgXcQ?rel=0",
    ])
    def test_standard_shapes(self, url):
        assert youtube_id(url) == "dQw4w9WgXcQ"

    @pytest.mark.parametrize("url", [
        "",
        "not a url",
        "https://www.youtube.com/",
        "https://www.youtube.com/embed/",
        "https://example.com/video.mp4",
    ])
    def test_malformed(self, url):
        assert youtube_id(url) == ""


class TestThumbFor:
    """Tests for thumbnail selection."""

    def test_image_is_own_thumb(self):
        item = MediaItem(MediaType.IMAGE, "https://example.com/a.jpg")
        assert thumb_for(item, COVER) == "https://example.com/a.jpg"

    def test_youtube_thumb(self):
        item = MediaItem(MediaType.YOUTUBE, "https://www.youtube.com/embed/3JZ_D3ELwOQ")
        thumb = thumb_for(item, COVER)
        assert thumb.startswith("https://img.youtube.com/")
        assert "3JZ_D3ELwOQ" in thumb

    def test_malformed_youtube_uses_fallback(self):
        item = MediaItem(MediaType.YOUTUBE, "garbage")
        assert thumb_for(item, COVER) == COVER
        assert thumb_for(item) == ""

    def test_video_uses_fallback(self):
        item = MediaItem(MediaType.VIDEO, "https://example.com/clip.mp4")
        assert thumb_for(item, COVER) == COVER

    def test_preview_src(self):
        image = MediaItem(MediaType.IMAGE, "https://example.com/a.jpg")
        video = MediaItem(MediaType.VIDEO, "https://example.com/clip.mp4")
        assert preview_src(image, COVER) == image.src
        assert preview_src(video, COVER) == COVER


class TestYoutubePlayer:
    """Tests for embed URL and player commands."""

    def test_player_url_params(self):
        url = youtube_player_url("https://www.youtube.com/embed/abc123", origin="https://site.dev")
        assert url.startswith("https://www.youtube.com/embed/abc123?")
        for param in ("enablejsapi=1", "rel=0", "modestbranding=1", "autoplay=1", "mute=1"):
            assert param in url
        assert "origin=https%3A%2F%2Fsite.dev" in url

    def test_command_payload(self):
        payload = json.loads(youtube_command("stopVideo"))
        assert payload == {"event": "command", "func": "stopVideo", "args": []}


class TestWrapIndex:
    """Tests for carousel index arithmetic."""

    def test_forward_wraps(self):
        assert wrap_index(2, 1, 3) == 0

    def test_backward_wraps(self):
        assert wrap_index(0, -1, 3) == 2

    def test_empty(self):
        assert wrap_index(0, 1, 0) == 0
