"""
Public application facade for the album gallery service.

Single stable entry point for the HTTP layer and the CLI demo. All provider
wiring and factory usage is encapsulated here.
"""
import logging
from typing import List, Optional, Sequence

from .catalog import AlbumCatalog
from .config import GalleryConfig
from .config_loader import log_provider_keys
from .models import Album
from .providers import create_providers
from .providers.base import ChatProvider, VisionProvider
from .proxy import AIProxyService, TTLCache
from .schemas import AskResponse, CaptionResponse
from .security import InputValidator

logger = logging.getLogger(__name__)


class AlbumGalleryApp:
    """
    Application facade.

    Usage:
        config = load_config_from_env()
        app = AlbumGalleryApp(config)
        app.initialize()
        response = app.ask("What sensors does AAVSS use?", context)
    """

    def __init__(self, config: GalleryConfig, catalog: Optional[AlbumCatalog] = None):
        """
        :param config: GalleryConfig instance
        :param catalog: Album catalog (defaults to the built-in albums)
        """
        self._config = config
        self._catalog = catalog or AlbumCatalog()
        self._proxy: Optional[AIProxyService] = None

    @property
    def config(self) -> GalleryConfig:
        return self._config

    @property
    def catalog(self) -> AlbumCatalog:
        return self._catalog

    def initialize(
        self,
        ask_providers: Optional[Sequence[ChatProvider]] = None,
        caption_providers: Optional[Sequence[VisionProvider]] = None,
    ) -> None:
        """
        Build the provider chains and the proxy.

        Providers are created from configured API keys unless injected.
        Call once before ask() or caption(); repeated calls are no-ops.
        """
        if self._proxy:
            return

        log_provider_keys(self._config)

        if ask_providers is None or caption_providers is None:
            built_ask, built_caption = create_providers(self._config)
            if ask_providers is None:
                ask_providers = built_ask
            if caption_providers is None:
                caption_providers = built_caption

        self._proxy = AIProxyService(
            ask_providers,
            caption_providers,
            cache=TTLCache(self._config.caption_ttl_seconds),
        )

    def ask(self, question, context) -> AskResponse:
        """
        Validate and answer an album question.

        :raises ValidationError: If question/context is missing
        :raises PayloadTooLargeError: If the question is too long
        :raises RuntimeError: If initialize() has not been called
        """
        proxy = self._require_proxy()
        question, context = InputValidator.validate_ask(question, context)
        return proxy.ask(question, context)

    def caption(self, image_url) -> CaptionResponse:
        """
        Validate an image URL and return its caption and tags.

        :raises ValidationError: If the URL is missing or not http(s)
        :raises RuntimeError: If initialize() has not been called
        """
        proxy = self._require_proxy()
        image_url = InputValidator.validate_image_url(image_url)
        return proxy.caption(image_url)

    def search(self, term: str = "") -> List[Album]:
        return self._catalog.filter(term)

    def _require_proxy(self) -> AIProxyService:
        if not self._proxy:
            raise RuntimeError("App not initialized. Call initialize() first.")
        return self._proxy
