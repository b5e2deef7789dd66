"""
Tests for the deterministic chat topic router.
"""
import pytest

from album_gallery.catalog import AlbumCatalog
from album_gallery.chat.topic_router import ClarificationNeeded, TopicRouter
from album_gallery.chat.topics import Topic
from album_gallery.storage import ChatTopicStore, MemoryStorage


@pytest.fixture
def topic_store():
    return ChatTopicStore(MemoryStorage())


@pytest.fixture
def router(topic_store):
    return TopicRouter(topic_store)


class TestDetectTopic:
    """Tests for topic detection."""

    @pytest.mark.parametrize("question,expected", [
        ("What is AAVSS?", Topic.AAVSS),
        ("What sensors does AAVSS use?", Topic.AAVSS),
        ("Tell me about the Sri Lanka dataset license", Topic.DATASET),
        ("Tell me about the Sri Lanka roads", Topic.DATASET),
        ("how big is the dataset", Topic.DATASET),
        ("does it use lidar and radar together", Topic.AAVSS),
        ("are there lane annotations for rain", Topic.DATASET),
    ])
    def test_keywords(self, router, question, expected):
        assert router.detect_topic(question) == expected

    def test_explicit_mention_wins_over_keywords(self, router):
        assert router.detect_topic("does the dataset include lidar radar camera") == Topic.DATASET

    def test_open_album_breaks_ties(self, router):
        album = AlbumCatalog().get("dataset")
        assert router.detect_topic("what is this about", album) == Topic.DATASET

    def test_falls_back_to_stored_topic(self, router, topic_store):
        topic_store.set("AAVSS")
        assert router.detect_topic("how does it work") == Topic.AAVSS

    def test_no_match(self, router):
        assert router.detect_topic("hello there") is None


class TestRoute:
    """Tests for routing and guarded prompts."""

    def test_short_ambiguous_question_needs_clarification(self, router, topic_store):
        with pytest.raises(ClarificationNeeded) as exc_info:
            router.route("hello there")

        ids = [choice["id"] for choice in exc_info.value.choices]
        assert ids == ["AAVSS", "Sri_Lanka_Dataset"]
        assert topic_store.get() == ""

    def test_long_ambiguous_question_routes_without_topic(self, router):
        routed = router.route("can you explain how this whole thing works in practice")

        assert routed.topic is None
        assert routed.label == "Assistant"
        assert "Topic=Auto-detect" in routed.guarded

    def test_route_remembers_topic(self, router, topic_store):
        routed = router.route("What is AAVSS?")

        assert routed.topic == Topic.AAVSS
        assert routed.label == "AAVSS"
        assert topic_store.get() == "AAVSS"

        follow_up = router.route("how fast?")
        assert follow_up.topic == Topic.AAVSS

    def test_guarded_question_format(self, router):
        guarded = router.build_guarded_question(Topic.DATASET, "how many frames are annotated overall")

        assert guarded.startswith("[Topic=Sri Lankan Autonomous Driving Dataset.")
        assert "[Style=clear, structured, short paragraphs.]" in guarded
        assert "[Persona=Friendly expert" in guarded
        assert guarded.endswith("Q: how many frames are annotated overall")

    def test_short_question_style(self, router):
        guarded = router.build_guarded_question(Topic.AAVSS, "What is AAVSS?")
        assert "Style=concise bullets" in guarded

    def test_force_topic(self, router, topic_store):
        router.force_topic(Topic.DATASET)
        assert topic_store.get() == "Sri_Lanka_Dataset"
