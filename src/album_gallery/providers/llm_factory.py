import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from ..config import GalleryConfig
from .langchain_provider import LangChainProvider

logger = logging.getLogger(__name__)

try:
    from langchain_groq import ChatGroq
except ImportError:
    ChatGroq = None

try:
    from langchain_openai import ChatOpenAI
except ImportError:
    ChatOpenAI = None


@dataclass(frozen=True)
class ProviderSpec:
    chat_model: str
    vision_model: Optional[str] = None
    base_url: Optional[str] = None  # OpenAI-compatible endpoint; None for native clients


# Perplexity, DeepInfra and Gemini are reached through their OpenAI-compatible APIs.
PROVIDER_SPECS = {
    "groq": ProviderSpec(
        chat_model="llama-3.1-8b-instant",
        vision_model="meta-llama/llama-4-scout-17b-16e-instruct",
    ),
    "gemini": ProviderSpec(
        chat_model="gemini-2.0-flash",
        vision_model="gemini-2.0-flash",
        base_url="https://generativelanguage.googleapis.com/v1beta/openai/",
    ),
    "perplexity": ProviderSpec(
        chat_model="sonar",
        base_url="https://api.perplexity.ai",
    ),
    "openai": ProviderSpec(
        chat_model="gpt-4o-mini",
        vision_model="gpt-4o-mini",
    ),
    "deepinfra": ProviderSpec(
        chat_model="meta-llama/Meta-Llama-3.1-8B-Instruct",
        base_url="https://api.deepinfra.com/v1/openai",
    ),
}


def get_llm_instance(provider: str, model: str, api_key: str, timeout: float = 30.0) -> Any:
    """
    Factory to return a ready-to-use chat model for a provider.

    :param provider: 'groq', 'gemini', 'perplexity', 'openai' or 'deepinfra'
    :param model: Model name
    :param api_key: Provider API key
    :param timeout: Per-request timeout in seconds
    :return: LangChain chat model
    """
    provider = provider.lower()
    if provider not in PROVIDER_SPECS:
        raise ValueError(f"Unknown LLM provider: {provider}")

    if provider == "groq":
        if ChatGroq is None:
            raise ImportError("langchain_groq not installed")
        return ChatGroq(
            model=model,
            api_key=api_key,
            temperature=0.2,
            timeout=timeout,
            max_retries=0,
        )

    if ChatOpenAI is None:
        raise ImportError("langchain_openai not installed")
    return ChatOpenAI(
        model=model,
        api_key=api_key,
        base_url=PROVIDER_SPECS[provider].base_url,
        temperature=0.2,
        timeout=timeout,
        max_retries=0,
    )


def create_providers(config: GalleryConfig) -> Tuple[List[LangChainProvider], List[LangChainProvider]]:
    """
    Build the ordered ask and caption provider chains from configuration.

    Providers without an API key are skipped; caption providers without a
    vision model are skipped with a warning.

    :param config: GalleryConfig instance
    :return: (ask_providers, caption_providers)
    """
    keys = config.api_keys()

    ask_providers = []
    for name in config.ask_providers:
        api_key = keys.get(name)
        if not api_key:
            continue
        llm = get_llm_instance(name, PROVIDER_SPECS[name].chat_model, api_key, config.request_timeout)
        ask_providers.append(LangChainProvider(name, llm))

    caption_providers = []
    for name in config.caption_providers:
        api_key = keys.get(name)
        if not api_key:
            continue
        vision_model = PROVIDER_SPECS[name].vision_model
        if not vision_model:
            logger.warning(f"Provider '{name}' has no vision model; skipping for captions")
            continue
        llm = get_llm_instance(name, vision_model, api_key, config.request_timeout)
        caption_providers.append(LangChainProvider(name, llm, supports_vision=True))

    logger.info(
        f"Providers - ask: {[p.name for p in ask_providers]}, "
        f"caption: {[p.name for p in caption_providers]}"
    )
    return ask_providers, caption_providers
