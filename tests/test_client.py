"""
Tests for the backend API client.
"""
import json

import httpx
import pytest

from album_gallery.client import GalleryAPIClient
from album_gallery.config import GalleryConfig
from album_gallery.exceptions import ApiError

API_BASE = "http://backend.test"


def make_client(handler):
    return GalleryAPIClient(api_base=API_BASE + "/", http_client=httpx.Client(transport=httpx.MockTransport(handler)))


class TestGalleryAPIClient:
    """Tests for GalleryAPIClient."""

    def test_api_base_from_env(self, monkeypatch):
        monkeypatch.setenv("API_BASE", "http://from-env.test/")
        client = GalleryAPIClient(http_client=httpx.Client())
        assert client.api_base == "http://from-env.test"

    def test_from_config(self):
        config = GalleryConfig(api_base="http://configured.test", request_timeout=12.5)
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            return httpx.Response(200, json={"answer": "ok"})

        client = GalleryAPIClient.from_config(config, http_client=httpx.Client(transport=httpx.MockTransport(handler)))
        client.ask("q", "c")

        assert client.api_base == "http://configured.test"
        assert client.timeout == 12.5
        assert seen["url"] == "http://configured.test/api/ai"

    def test_ask(self):
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"answer": "It fuses lidar.", "provider": "groq"})

        answer = make_client(handler).ask("Sensors?", "Title: AAVSS")

        assert answer == "It fuses lidar."
        assert seen["url"] == "http://backend.test/api/ai"
        assert seen["body"] == {"mode": "ask", "question": "Sensors?", "context": "Title: AAVSS"}

    def test_caption(self):
        def handler(request):
            assert json.loads(request.content) == {"mode": "caption", "imageUrl": "https://x.dev/a.jpg"}
            return httpx.Response(200, json={"caption": "A road.", "tags": ["road"]})

        assert make_client(handler).caption("https://x.dev/a.jpg") == {"caption": "A road.", "tags": ["road"]}

    def test_expert_ask(self):
        def handler(request):
            assert request.url.path == "/api/ai-expert"
            return httpx.Response(200, json={"answer": "Expert answer"})

        assert make_client(handler).expert_ask("[Topic=AAVSS] Q: hi") == "Expert answer"

    def test_error_message_from_body(self):
        def handler(request):
            return httpx.Response(502, json={"error": "All providers failed. Try again later."})

        with pytest.raises(ApiError) as exc_info:
            make_client(handler).ask("q", "c")

        assert exc_info.value.status_code == 502
        assert str(exc_info.value) == "All providers failed. Try again later."

    def test_error_without_json_body(self):
        def handler(request):
            return httpx.Response(500, text="oops")

        with pytest.raises(ApiError, match="HTTP 500"):
            make_client(handler).ask("q", "c")

    def test_transport_error_wrapped(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ApiError):
            make_client(handler).ask("q", "c")

    def test_retries(self, monkeypatch):
        monkeypatch.setattr("album_gallery.client.time.sleep", lambda seconds: None)
        calls = []

        def handler(request):
            calls.append(1)
            if len(calls) < 3:
                return httpx.Response(503, json={"error": "busy"})
            return httpx.Response(200, json={"answer": "finally"})

        data = make_client(handler).post_json("/api/ai", {"mode": "ask"}, retries=2)

        assert data == {"answer": "finally"}
        assert len(calls) == 3

    def test_ping_unreachable_backend(self):
        def handler(request):
            raise httpx.ConnectError("down", request=request)

        assert make_client(handler).ping() == ""

    def test_ping_returns_text(self):
        def handler(request):
            return httpx.Response(403, text="forbidden")

        assert make_client(handler).ping() == "forbidden"
