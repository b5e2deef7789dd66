from typing import Protocol


class ChatProvider(Protocol):
    """Protocol for a provider that answers questions from album context."""
    name: str

    def ask(self, question: str, context: str) -> str:
        ...


class VisionProvider(Protocol):
    """Protocol for a provider that captions images and tags captions."""
    name: str

    def describe_image(self, image_url: str) -> str:
        ...

    def extract_tags(self, caption: str) -> str:
        ...
