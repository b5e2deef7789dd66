"""
Fixed conversation topics and their keyword tables.
"""
from enum import Enum


class Topic(Enum):
    AAVSS = "AAVSS"
    DATASET = "Sri_Lanka_Dataset"

    @classmethod
    def from_value(cls, value):
        """Topic for a stored value, or None for blank/unknown values."""
        for topic in cls:
            if topic.value == value:
                return topic
        return None


TOPIC_LABELS = {
    Topic.AAVSS: "AAVSS",
    Topic.DATASET: "Sri Lankan Dataset",
}

# Album id -> topic the album is about.
ALBUM_TOPICS = {
    "aavss": Topic.AAVSS,
    "dataset": Topic.DATASET,
}

KEYWORDS = {
    Topic.AAVSS: [
        "aavss", "vehicle safety", "autonomous vehicle safety", "jetson",
        "sensor fusion", "fusion", "lidar", "radar", "camera", "nvidia",
        "driver monitoring", "dms", "adas", "can bus", "v2x",
    ],
    Topic.DATASET: [
        "dataset", "sri lanka", "colombo", "kandy", "galle", "annotations",
        "segmentation", "bounding box", "lane", "night", "rain", "fog",
        "traffic signs", "autonomous driving dataset",
    ],
}
