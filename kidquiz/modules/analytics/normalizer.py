"""History Normalizer - Infers quiz metadata from free-text titles.

Older quizzes only carry a title such as "Beginner Math: Plus and Minus".
The subject, difficulty and topic are recovered from it with simple
keyword matching.
"""

import re
from typing import NamedTuple

from kidquiz.shared.models import Difficulty, Subject

DEFAULT_SUBJECT = "general"
DEFAULT_TOPIC = "General"

# Words removed, one after another in this order, from a colon-less title
_TITLE_NOISE = [d.value for d in Difficulty] + [s.value for s in Subject] + ["quiz"]
_NOISE_PATTERNS = [re.compile(re.escape(word), re.IGNORECASE) for word in _TITLE_NOISE]


class TitleMetadata(NamedTuple):
    """Metadata recovered from a quiz title."""

    subject: str
    difficulty: str
    topic: str


def infer_difficulty(title: str) -> str:
    """Return the first difficulty mentioned in the title, else beginner."""
    lowered = title.lower()
    for difficulty in Difficulty:
        if difficulty.value in lowered:
            return difficulty.value
    return Difficulty.BEGINNER.value


def infer_subject(title: str) -> str:
    """Return the first known subject mentioned in the title, else general."""
    lowered = title.lower()
    for subject in Subject:
        if subject.value in lowered:
            return subject.value
    return DEFAULT_SUBJECT


def infer_topic(title: str) -> str:
    """Extract the topic from a title.

    Everything after the first colon is the topic. Without a colon the
    difficulty, subject and "quiz" words are stripped and the rest is used.
    """
    if ":" in title:
        return title.split(":", 1)[1].strip()

    topic = title
    for pattern in _NOISE_PATTERNS:
        topic = pattern.sub("", topic)
    topic = topic.strip()
    return topic or DEFAULT_TOPIC


def normalize_title(title: str) -> TitleMetadata:
    """Derive (subject, difficulty, topic) from a quiz title.

    Args:
        title: Free-text quiz title

    Returns:
        TitleMetadata
    """
    return TitleMetadata(
        subject=infer_subject(title),
        difficulty=infer_difficulty(title),
        topic=infer_topic(title),
    )
