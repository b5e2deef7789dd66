"""
Deterministic topic router for chat questions.

Classifies a question into one of the fixed topics by explicit mentions and
keyword counting. No LLM calls.
"""
import logging
import re
from dataclasses import dataclass
from typing import List, Optional

from ..exceptions import GalleryError
from ..models import Album
from ..storage import ChatTopicStore
from .topics import Topic, TOPIC_LABELS, ALBUM_TOPICS, KEYWORDS

logger = logging.getLogger(__name__)

AAVSS_PATTERN = re.compile(r"\baavss\b")
DATASET_PATTERN = re.compile(r"\b(sri\s*lanka|dataset)\b")

SHORT_QUESTION_WORDS = 3


class ClarificationNeeded(GalleryError):
    """Raised when a short question matches no topic; the user should pick one."""

    def __init__(self, choices: List[dict]):
        super().__init__("Question is ambiguous; pick a topic")
        self.choices = choices


@dataclass
class RoutedQuestion:
    topic: Optional[Topic]
    guarded: str

    @property
    def label(self) -> str:
        return TOPIC_LABELS.get(self.topic, "Assistant") if self.topic else "Assistant"


class TopicRouter:
    """
    Routes chat questions to a topic and wraps them in a guarded prompt.

    The last detected topic is remembered in the topic store and biases
    later questions that match nothing.
    """

    def __init__(self, topic_store: ChatTopicStore):
        self._store = topic_store

    def detect_topic(self, question: str, current_album: Optional[Album] = None) -> Optional[Topic]:
        """
        Detect the topic of a question.

        :param question: Free-text question
        :param current_album: Album open in the overlay, if any
        :return: Topic, or None when nothing matches
        """
        text = (question or "").lower()

        if AAVSS_PATTERN.search(text):
            return Topic.AAVSS
        if DATASET_PATTERN.search(text):
            return Topic.DATASET

        a = sum(1 for keyword in KEYWORDS[Topic.AAVSS] if keyword in text)
        d = sum(1 for keyword in KEYWORDS[Topic.DATASET] if keyword in text)
        if a > d:
            return Topic.AAVSS
        if d > a:
            return Topic.DATASET

        if current_album is not None and current_album.id in ALBUM_TOPICS:
            return ALBUM_TOPICS[current_album.id]

        return Topic.from_value(self._store.get())

    @staticmethod
    def is_short(question: str) -> bool:
        return len((question or "").split()) <= SHORT_QUESTION_WORDS

    def build_guarded_question(self, topic: Optional[Topic], question: str) -> str:
        if self.is_short(question):
            style = "Style=concise bullets, 1–5 lines max."
        else:
            style = "Style=clear, structured, short paragraphs."

        if topic == Topic.AAVSS:
            scope = "Topic=AAVSS. Only answer about AAVSS unless explicitly asked to compare."
        elif topic == Topic.DATASET:
            scope = (
                "Topic=Sri Lankan Autonomous Driving Dataset. "
                "Only answer about the dataset unless explicitly asked to compare."
            )
        else:
            scope = "Topic=Auto-detect. Prefer single-topic answer; do not mix topics unless asked."

        persona = "Persona=Friendly expert, human tone. Be concrete and practical."
        return f"[{scope}] [{style}] [{persona}] Q: {question}"

    def route(self, question: str, current_album: Optional[Album] = None) -> RoutedQuestion:
        """
        Route a question.

        :raises ClarificationNeeded: If no topic matches and the question is short
        """
        topic = self.detect_topic(question, current_album)
        if topic is None and self.is_short(question):
            logger.debug(f"Clarification needed for '{question}'")
            raise ClarificationNeeded(self.choices())

        if topic is not None:
            self._store.set(topic.value)

        return RoutedQuestion(topic=topic, guarded=self.build_guarded_question(topic, question))

    def force_topic(self, topic: Topic) -> None:
        self._store.set(topic.value)

    @staticmethod
    def choices() -> List[dict]:
        return [{"id": topic.value, "label": TOPIC_LABELS[topic]} for topic in Topic]
