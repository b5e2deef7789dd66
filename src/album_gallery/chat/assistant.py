"""
Ask-the-album assistant and image captioning, independent of any UI.
"""
import logging
from typing import List, Optional, Protocol

from ..catalog import AlbumCatalog
from ..models import Album
from ..schemas import AlbumCaptions, ChatReply, ImageCaption
from ..storage import AITagStore, CaptionStore, dedupe_tags
from .context import build_album_context
from .topic_router import ClarificationNeeded, TopicRouter
from .topics import Topic

logger = logging.getLogger(__name__)

APOLOGY = "Sorry — the assistant had an issue. Please try again."
NO_ANSWER = "No answer."


class AlbumAIClient(Protocol):
    """Protocol for the backend calls the assistant needs."""

    def ask(self, question: str, context: str) -> str:
        ...

    def caption(self, image_url: str) -> dict:
        ...

    def expert_ask(self, question: str) -> str:
        ...


class AlbumAssistant:
    """
    Chat-style Q&A over the album catalog.

    Flow for a question:
    1. Route to a topic (may ask the user to clarify)
    2. Ask the expert endpoint with the guarded question
    3. On failure, fall back to album-scoped ask with the album context
    4. On total failure, reply with an apology instead of raising
    """

    def __init__(
        self,
        client: AlbumAIClient,
        router: TopicRouter,
        catalog: AlbumCatalog,
        caption_store: CaptionStore,
        tag_store: AITagStore,
    ):
        self._client = client
        self._router = router
        self._catalog = catalog
        self._captions = caption_store
        self._tags = tag_store

    def ask(self, question: str, album: Optional[Album] = None) -> Optional[ChatReply]:
        """
        Answer a question.

        :param question: Free-text question
        :param album: Album open in the overlay, if any
        :return: ChatReply, or None for a blank question
        """
        q = (question or "").strip()
        if not q:
            return None

        try:
            try:
                routed = self._router.route(q, album)
            except ClarificationNeeded as e:
                return ChatReply(kind="clarify", text="Please pick a topic so I can answer precisely:",
                                 topic_label="What did you mean?", choices=e.choices)

            try:
                answer = self._client.expert_ask(routed.guarded)
            except Exception as e:
                logger.warning(f"expert_ask failed, falling back: {e}")
                fallback_album = album or self._first_album()
                answer = self._client.ask(q, build_album_context(fallback_album))

            return ChatReply(kind="answer", text=answer or NO_ANSWER, topic_label=routed.label)
        except Exception as e:
            logger.error(f"ask error: {e}", exc_info=True)
            return ChatReply(kind="error", text=APOLOGY)

    def choose_topic(self, topic_id: str) -> None:
        """Record the user's pick after a clarify reply."""
        topic = Topic.from_value(topic_id)
        if topic is None:
            raise ValueError(f"Unknown topic: {topic_id}")
        self._router.force_topic(topic)

    def caption_album(self, album: Album) -> AlbumCaptions:
        """
        Caption every image in an album and merge the tags into search.

        Cached captions are reused; failed images are skipped.
        """
        items: List[ImageCaption] = []
        all_tags: List[str] = []

        for index, item in album.images():
            try:
                cached = self._captions.get(item.src)
                data = cached or self._client.caption(item.src)
                if not cached:
                    self._captions.set(item.src, data)
            except Exception as e:
                logger.warning(f"caption error for {item.src}: {e}")
                continue

            tags = [str(tag) for tag in data.get("tags") or []]
            items.append(ImageCaption(
                index=index,
                src=item.src,
                caption=data.get("caption") or "",
                tags=tags,
                cached=cached is not None,
            ))
            all_tags.extend(tags)

        merged = dedupe_tags(all_tags)
        self._tags.set(album.id, merged)
        return AlbumCaptions(items=items, tags=merged)

    def _first_album(self) -> Optional[Album]:
        albums = self._catalog.all()
        return albums[0] if albums else None
