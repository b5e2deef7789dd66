"""
Provider implementation over a LangChain chat model.
"""
import logging
from typing import Any

from langchain_core.messages import HumanMessage, SystemMessage

from ..exceptions import ProviderError
from .prompts import (
    ASK_SYSTEM_PROMPT,
    ASK_USER_TEMPLATE,
    CAPTION_SYSTEM_PROMPT,
    CAPTION_USER_PROMPT,
    TAGS_SYSTEM_PROMPT,
    TAGS_USER_TEMPLATE,
)

logger = logging.getLogger(__name__)

ASK_MAX_TOKENS = 400
CAPTION_MAX_TOKENS = 160
TAGS_MAX_TOKENS = 60


def _is_timeout(error: Exception) -> bool:
    if isinstance(error, TimeoutError):
        return True
    return "timeout" in type(error).__name__.lower()


def _message_text(message: Any) -> str:
    """Text of a chat model reply; content may be a string or a list of parts."""
    content = getattr(message, "content", message)
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, dict):
                parts.append(part.get("text", ""))
            else:
                parts.append(str(part))
        content = "".join(parts)
    return (content or "").strip()


class LangChainProvider:
    """
    ChatProvider and VisionProvider over any LangChain chat model.

    Every upstream failure is raised as ProviderError so the proxy can move
    on to the next provider.
    """

    def __init__(self, name: str, llm: Any, supports_vision: bool = False):
        """
        :param name: Provider name reported to clients (e.g. "groq")
        :param llm: LangChain chat model (anything with invoke(messages, **kwargs))
        :param supports_vision: Whether the model accepts image_url content
        """
        self.name = name
        self.llm = llm
        self.supports_vision = supports_vision

    def _invoke(self, messages, **kwargs) -> str:
        try:
            reply = self.llm.invoke(messages, **kwargs)
        except Exception as e:
            raise ProviderError(self.name, str(e) or type(e).__name__, timed_out=_is_timeout(e)) from e
        return _message_text(reply)

    def ask(self, question: str, context: str) -> str:
        messages = [
            SystemMessage(content=ASK_SYSTEM_PROMPT),
            HumanMessage(content=ASK_USER_TEMPLATE.format(context=context, question=question)),
        ]
        return self._invoke(messages, temperature=0.2, max_tokens=ASK_MAX_TOKENS)

    def describe_image(self, image_url: str) -> str:
        if not self.supports_vision:
            raise ProviderError(self.name, "model does not support images")
        messages = [
            SystemMessage(content=CAPTION_SYSTEM_PROMPT),
            HumanMessage(content=[
                {"type": "text", "text": CAPTION_USER_PROMPT},
                {"type": "image_url", "image_url": {"url": image_url}},
            ]),
        ]
        return self._invoke(messages, temperature=0.2, max_tokens=CAPTION_MAX_TOKENS)

    def extract_tags(self, caption: str) -> str:
        messages = [
            SystemMessage(content=TAGS_SYSTEM_PROMPT),
            HumanMessage(content=TAGS_USER_TEMPLATE.format(caption=caption)),
        ]
        return self._invoke(messages, temperature=0.1, max_tokens=TAGS_MAX_TOKENS)

    def __repr__(self) -> str:
        return f"LangChainProvider(name={self.name!r}, vision={self.supports_vision})"
