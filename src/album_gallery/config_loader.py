"""
Configuration loader with validation.
"""
import logging

from dotenv import load_dotenv

from .config import (
    GalleryConfig,
    DEFAULT_API_BASE,
    DEFAULT_ASK_PROVIDERS,
    DEFAULT_CAPTION_PROVIDERS,
)
from .config_validator import (
    get_optional_env,
    get_int_env,
    get_float_env,
    get_bool_env,
    parse_csv,
    parse_origins,
    validate_provider_names,
    mask_secret,
)
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

KNOWN_PROVIDERS = ["groq", "gemini", "perplexity", "openai", "deepinfra"]


def load_config_from_env(dotenv: bool = True) -> GalleryConfig:
    """
    Load configuration from environment variables with validation.

    Usage:
        config = load_config_from_env()
        app = create_app(config)

    :param dotenv: Load .env / .env.local first (local development)
    :return: Validated GalleryConfig instance
    :raises: ConfigurationError if values are invalid
    """
    if dotenv:
        load_dotenv()
        load_dotenv(".env.local")

    ask_providers = parse_csv(get_optional_env("ASK_PROVIDERS")) or list(DEFAULT_ASK_PROVIDERS)
    caption_providers = (
        parse_csv(get_optional_env("CAPTION_PROVIDERS")) or list(DEFAULT_CAPTION_PROVIDERS)
    )

    config = GalleryConfig(
        groq_api_key=get_optional_env("GROQ_API_KEY"),
        google_api_key=get_optional_env("GOOGLE_API_KEY"),
        pplx_api_key=get_optional_env("PPLX_API_KEY"),
        openai_api_key=get_optional_env("OPENAI_API_KEY"),
        deepinfra_api_key=get_optional_env("DEEPINFRA_API_KEY"),
        ask_providers=validate_provider_names(ask_providers, KNOWN_PROVIDERS, "ASK_PROVIDERS"),
        caption_providers=validate_provider_names(
            caption_providers, KNOWN_PROVIDERS, "CAPTION_PROVIDERS"
        ),
        request_timeout=get_float_env("REQUEST_TIMEOUT", 30.0),
        caption_ttl_seconds=get_int_env("CAPTION_TTL_SECONDS", 3600),
        host=get_optional_env("HOST", "0.0.0.0"),
        port=get_int_env("PORT", 3000),
        cors_origins=parse_origins(get_optional_env("CORS_ORIGINS")),
        rate_limit=get_optional_env("RATE_LIMIT", "100 per hour"),
        rate_limit_enabled=get_bool_env("RATE_LIMIT_ENABLED", True),
        api_base=(get_optional_env("API_BASE", DEFAULT_API_BASE)).rstrip("/"),
    )

    if config.request_timeout <= 0:
        raise ConfigurationError("REQUEST_TIMEOUT must be positive")
    if config.caption_ttl_seconds < 0:
        raise ConfigurationError("CAPTION_TTL_SECONDS must not be negative")

    return config


def log_provider_keys(config: GalleryConfig) -> None:
    """Log which provider keys are present at boot, masked."""
    for name, key in config.api_keys().items():
        if key:
            logger.info(f"[boot] {name} key: present ({mask_secret(key)})")
        else:
            logger.info(f"[boot] {name} key: missing")

    if not config.has_any_provider():
        logger.warning("[boot] No provider keys found. /api/ai will fail until keys are set in .env(.local)")
