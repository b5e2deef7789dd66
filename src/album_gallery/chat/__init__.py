"""
Chat layer: topic routing, prompt guarding and answer rendering.

Sits between a UI (CLI, browser) and the backend client.
"""
from .topics import Topic
from .topic_router import TopicRouter, RoutedQuestion, ClarificationNeeded
from .context import build_album_context
from .markdown import md_to_html
from .typewriter import typewriter_frames
from .assistant import AlbumAssistant, APOLOGY

__all__ = [
    "Topic",
    "TopicRouter",
    "RoutedQuestion",
    "ClarificationNeeded",
    "build_album_context",
    "md_to_html",
    "typewriter_frames",
    "AlbumAssistant",
    "APOLOGY",
]
