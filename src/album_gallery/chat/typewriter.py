"""
Character-by-character typing animation, as a stream of render frames.
"""
import random
from typing import Iterator, Optional, Tuple

from .markdown import md_to_html


def typewriter_frames(
    text: str,
    cps: int = 48,
    min_delay: float = 8,
    max_delay: float = 26,
    rng: Optional[random.Random] = None,
) -> Iterator[Tuple[str, float]]:
    """
    Yield (html, delay_seconds) for each typed character.

    Each frame renders the prefix typed so far; the delay is a jittered
    per-character pause scaled by characters-per-second.

    :param text: Full answer text (Markdown)
    :param cps: Nominal characters per second
    :param min_delay: Lower jitter bound in milliseconds
    :param max_delay: Upper jitter bound in milliseconds
    :param rng: Random source (for deterministic tests)
    """
    rng = rng or random.Random()
    safe = text or ""
    for i in range(len(safe)):
        jitter = rng.random() * (max_delay - min_delay) + min_delay
        jitter = max(min_delay, min(max_delay, jitter))
        yield md_to_html(safe[: i + 1]), jitter * (60 / cps) / 1000
