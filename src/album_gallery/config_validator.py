"""
Configuration validation utilities.
"""
import os
import warnings
from typing import List, Optional

from .exceptions import ConfigurationError


def get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get optional environment variable.

    Placeholder values (copied from .env.example) fall back to the default.

    :param key: Environment variable name
    :param default: Default value if not set
    :return: Stripped environment variable value or default
    """
    value = os.getenv(key)
    if value is None:
        return default

    value = value.strip()
    if not value:
        return default

    if _is_placeholder(value):
        warnings.warn(
            f"{key} appears to be a placeholder. Using default or None.",
            UserWarning
        )
        return default

    return value


def get_int_env(key: str, default: int) -> int:
    """
    Get integer environment variable.

    :raises: ConfigurationError if the value is not an integer
    """
    value = get_optional_env(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"{key} must be an integer, got {value!r}")


def get_float_env(key: str, default: float) -> float:
    """
    Get float environment variable.

    :raises: ConfigurationError if the value is not a number
    """
    value = get_optional_env(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        raise ConfigurationError(f"{key} must be a number, got {value!r}")


def get_bool_env(key: str, default: bool) -> bool:
    value = get_optional_env(key)
    if value is None:
        return default
    return value.lower() in ("1", "true", "yes", "on")


def parse_csv(value: Optional[str]) -> List[str]:
    """
    Split a comma-separated value into trimmed, non-empty items.

    :param value: Raw value such as "https://a.com, https://b.com"
    :return: List of items (empty list for None or blank input)
    """
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def parse_origins(value: Optional[str]) -> List[str]:
    """Parse CORS_ORIGINS; trailing slashes are dropped so they match the Origin header."""
    return [origin.rstrip("/") for origin in parse_csv(value)]


def validate_provider_names(names: List[str], known: List[str], key: str) -> List[str]:
    """
    Validate provider names against the known provider list.

    :param names: Names from configuration (case-insensitive)
    :param known: Supported provider names
    :param key: Environment variable name (for error messages)
    :return: Lowercased names
    :raises: ConfigurationError if a name is unknown
    """
    result = []
    for name in names:
        lowered = name.lower()
        if lowered not in known:
            raise ConfigurationError(
                f"{key} contains unknown provider '{name}'. "
                f"Known providers: {', '.join(known)}"
            )
        result.append(lowered)
    return result


def _is_placeholder(value: str) -> bool:
    """Check if value is a placeholder."""
    if not value:
        return False

    placeholder_patterns = [
        "your_",
        "placeholder",
        "xxx",
        "sk-0000",
        "gsk_0000",
        "replace",
    ]

    value_lower = value.lower()
    return any(pattern in value_lower for pattern in placeholder_patterns)


def mask_secret(secret: Optional[str], show_chars: int = 4) -> str:
    """
    Mask secret for safe display in log messages.

    :param secret: Secret to mask
    :param show_chars: Number of characters to show at start/end
    :return: Masked secret
    """
    if not secret or len(secret) <= show_chars * 2:
        return "***"

    return f"{secret[:show_chars]}...{secret[-show_chars:]}"
