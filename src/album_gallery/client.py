"""Client for the album AI backend.

Python counterpart of the gallery's browser fetch helpers: album-scoped Q&A,
vision captions and the expert Q&A endpoint.
"""

import logging
import os
import time
from typing import Optional

import httpx

from .config import DEFAULT_API_BASE, GalleryConfig
from .exceptions import ApiError

logger = logging.getLogger(__name__)


class GalleryAPIClient:
    """Client for calling the album AI backend.

    The API origin comes from the constructor, else the API_BASE environment
    variable, else the hosted default.
    """

    def __init__(
        self,
        api_base: Optional[str] = None,
        timeout: float = 30.0,
        http_client: Optional[httpx.Client] = None,
    ):
        """
        Initialize client.

        Args:
            api_base: Backend origin, e.g. http://localhost:8787
            timeout: Request timeout in seconds
            http_client: Preconfigured httpx client (tests inject a mock transport)
        """
        self.api_base = (api_base or os.getenv("API_BASE") or DEFAULT_API_BASE).rstrip("/")
        self.timeout = timeout
        self.client = http_client or httpx.Client(timeout=timeout)
        logger.info(f"GalleryAPIClient initialized: api_base={self.api_base}")

    @classmethod
    def from_config(cls, config: GalleryConfig, http_client: Optional[httpx.Client] = None) -> "GalleryAPIClient":
        """Client for the configured backend origin and request timeout."""
        return cls(api_base=config.api_base, timeout=config.request_timeout, http_client=http_client)

    def post_json(self, path: str, payload: dict, retries: int = 0) -> dict:
        """POST a JSON payload and return the decoded JSON body.

        Args:
            path: Endpoint path, e.g. /api/ai
            payload: JSON-serialisable body
            retries: Extra attempts after a failure, with linear backoff

        Returns:
            Decoded JSON object ({} when the body is not JSON)

        Raises:
            ApiError: On a non-2xx status or transport failure after retries
        """
        url = f"{self.api_base}{path}"
        for attempt in range(retries + 1):
            try:
                response = self.client.post(url, json=payload)
                try:
                    data = response.json()
                except ValueError:
                    data = {}
                if not isinstance(data, dict):
                    data = {}
                if response.is_error:
                    raise ApiError(data.get("error") or f"HTTP {response.status_code}", response.status_code)
                return data
            except (ApiError, httpx.HTTPError) as e:
                if attempt < retries:
                    time.sleep(0.4 * (attempt + 1))
                    continue
                logger.error(f"post_json failed: {url}: {e}")
                if isinstance(e, ApiError):
                    raise
                raise ApiError(str(e)) from e

    def ask(self, question: str, context: str) -> str:
        """Album-scoped Q&A."""
        data = self.post_json("/api/ai", {"mode": "ask", "question": question, "context": context})
        return data.get("answer") or ""

    def caption(self, image_url: str) -> dict:
        """Vision caption + tags: {"caption": str, "tags": [str]}."""
        data = self.post_json("/api/ai", {"mode": "caption", "imageUrl": image_url})
        return {"caption": data.get("caption") or "", "tags": list(data.get("tags") or [])}

    def expert_ask(self, question: str) -> str:
        """Expert deep Q&A."""
        data = self.post_json("/api/ai-expert", {"question": question})
        return data.get("answer") or ""

    def ping(self) -> str:
        """Send a test question and return the raw response text.

        Used as a connectivity check; failures are logged, not raised.
        Returns "" when the backend cannot be reached.
        """
        try:
            response = self.client.post(
                f"{self.api_base}/api/ai",
                json={"mode": "ask", "question": "Ping from client", "context": "Test context"},
            )
        except httpx.HTTPError as e:
            logger.warning(f"API ping failed: {e}. Check API_BASE here.")
            return ""
        if response.is_error:
            logger.warning("API ping failed. Check CORS_ORIGINS on the backend and API_BASE here.")
        return response.text

    def close(self) -> None:
        self.client.close()
