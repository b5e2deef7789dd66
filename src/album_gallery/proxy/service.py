"""
AI proxy: ordered provider fallback for ask and caption.
"""
import logging
from typing import List, Optional, Sequence

from ..exceptions import (
    AllProvidersFailedError,
    NoProvidersConfiguredError,
    ProviderError,
    UpstreamTimeoutError,
)
from ..providers.base import ChatProvider, VisionProvider
from ..schemas import AskResponse, CaptionResponse
from .cache import TTLCache

logger = logging.getLogger(__name__)

MAX_TAGS = 8


def parse_tags(line: str) -> List[str]:
    """Split a comma-separated tag line into trimmed, non-empty tags (at most 8)."""
    return [tag.strip() for tag in (line or "").split(",") if tag.strip()][:MAX_TAGS]


class AIProxyService:
    """
    Stateless request forwarder with provider fallback.

    Providers are tried in order; the first success wins. The only shared
    state is the caption cache.
    """

    def __init__(
        self,
        ask_providers: Sequence[ChatProvider],
        caption_providers: Sequence[VisionProvider],
        cache: Optional[TTLCache] = None,
    ):
        self.ask_providers = list(ask_providers)
        self.caption_providers = list(caption_providers)
        self.cache = cache if cache is not None else TTLCache()

    def ask(self, question: str, context: str) -> AskResponse:
        """
        Answer a question from album context.

        :return: AskResponse with the answer and the provider that produced it
        :raises NoProvidersConfiguredError: If no ask provider is configured
        :raises AllProvidersFailedError: If every provider failed
        """
        if not self.ask_providers:
            raise NoProvidersConfiguredError("All providers failed or no API keys configured")

        errors: List[ProviderError] = []
        for provider in self.ask_providers:
            try:
                answer = provider.ask(question, context)
            except ProviderError as e:
                logger.warning(f"[ask] {provider.name} failed: {e}")
                errors.append(e)
                continue
            logger.info(f"[ask] answered by {provider.name}")
            return AskResponse(answer=answer or "No answer.", provider=provider.name)

        raise self._exhausted("ask", errors)

    def caption(self, image_url: str) -> CaptionResponse:
        """
        Caption an image and derive tags from the caption.

        Results are cached per URL for the cache TTL; a hit makes no upstream call.

        :raises NoProvidersConfiguredError: If no vision provider is configured
        :raises AllProvidersFailedError: If every provider failed
        """
        hit = self.cache.get(image_url)
        if hit is not None:
            logger.debug(f"[caption] cache hit for {image_url}")
            return hit

        if not self.caption_providers:
            raise NoProvidersConfiguredError("No vision-capable provider configured for captions")

        errors: List[ProviderError] = []
        for provider in self.caption_providers:
            try:
                caption = provider.describe_image(image_url)
                tags = parse_tags(provider.extract_tags(caption))
            except ProviderError as e:
                logger.warning(f"[caption] {provider.name} failed: {e}")
                errors.append(e)
                continue
            result = CaptionResponse(caption=caption, tags=tags)
            self.cache.set(image_url, result)
            logger.info(f"[caption] {provider.name} captioned {image_url} with {len(tags)} tags")
            return result

        raise self._exhausted("caption", errors)

    @staticmethod
    def _exhausted(mode: str, errors: List[ProviderError]) -> AllProvidersFailedError:
        if errors and all(e.timed_out for e in errors):
            return UpstreamTimeoutError("Upstream request timed out", errors)
        return AllProvidersFailedError(f"All providers failed for {mode}", errors)
