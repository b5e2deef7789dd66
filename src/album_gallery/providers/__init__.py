from .base import ChatProvider, VisionProvider
from .langchain_provider import LangChainProvider
from .llm_factory import PROVIDER_SPECS, get_llm_instance, create_providers

__all__ = [
    "ChatProvider",
    "VisionProvider",
    "LangChainProvider",
    "PROVIDER_SPECS",
    "get_llm_instance",
    "create_providers",
]
