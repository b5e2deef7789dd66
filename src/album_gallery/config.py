from dataclasses import dataclass, field
from typing import Dict, List, Optional


DEFAULT_API_BASE = "https://album-ai-backend-new.vercel.app"

# Ordered fallback chains; providers without a key are skipped.
DEFAULT_ASK_PROVIDERS = ["groq", "gemini", "perplexity", "openai", "deepinfra"]
DEFAULT_CAPTION_PROVIDERS = ["openai", "gemini"]


@dataclass
class GalleryConfig:
    # Provider keys
    groq_api_key: Optional[str] = None
    google_api_key: Optional[str] = None
    pplx_api_key: Optional[str] = None
    openai_api_key: Optional[str] = None
    deepinfra_api_key: Optional[str] = None

    # Provider routing
    ask_providers: List[str] = field(default_factory=lambda: list(DEFAULT_ASK_PROVIDERS))
    caption_providers: List[str] = field(default_factory=lambda: list(DEFAULT_CAPTION_PROVIDERS))
    request_timeout: float = 30.0
    caption_ttl_seconds: int = 3600

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: List[str] = field(default_factory=list)
    max_body_bytes: int = 1024 * 1024
    rate_limit: str = "100 per hour"
    rate_limit_enabled: bool = True

    # Client
    api_base: str = DEFAULT_API_BASE

    def api_keys(self) -> Dict[str, Optional[str]]:
        """Provider name -> API key (None when unset)."""
        return {
            "groq": self.groq_api_key,
            "gemini": self.google_api_key,
            "perplexity": self.pplx_api_key,
            "openai": self.openai_api_key,
            "deepinfra": self.deepinfra_api_key,
        }

    def has_any_provider(self) -> bool:
        return any(self.api_keys().values())
