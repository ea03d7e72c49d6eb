from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, Tuple

from .keywords import BEHAVIORAL_KEYWORDS, EXAMPLE_MARKERS, STAR_INDICATORS, TECHNICAL_KEYWORDS

MIN_SCORE = 1.0
MAX_SCORE = 10.0
JITTER_SPAN = 0.4

FEEDBACK_NO_TECHNICAL_DEPTH = "Answer lacks technical depth. Include specific technical concepts and examples."
FEEDBACK_STAR_USED = "Good use of specific examples and structured response."
FEEDBACK_STAR_MISSING = "Consider using specific examples with situation, action, and results."


@dataclass(frozen=True)
class LengthBucket:
    """Base score range [low, high) and feedback for answers of at least min_words words."""
    min_words: int
    low: float
    high: float
    feedback: str


# Ordered by min_words, longest first wins
LENGTH_BUCKETS: Tuple[LengthBucket, ...] = (
    LengthBucket(0, 1.0, 4.0, "Answer too brief. Needs more detail and examples."),
    LengthBucket(20, 3.0, 6.0, "Basic answer provided. Could elaborate with more specific examples."),
    LengthBucket(50, 5.0, 8.0, "Good detailed response. Shows understanding of the topic."),
    LengthBucket(100, 7.0, 9.0, "Comprehensive answer with excellent detail and examples."),
)


def count_words(text: str) -> int:
    """Number of whitespace-delimited tokens."""
    return len(text.split())


def find_keywords(text: str, keywords: Iterable[str]) -> List[str]:
    """Keywords contained in text, case-insensitive substring match."""
    lowered = text.lower()
    return [kw for kw in keywords if kw in lowered]


def count_keyword_matches(text: str, keywords: Iterable[str]) -> int:
    return len(find_keywords(text, keywords))


def has_example_marker(text: str) -> bool:
    return count_keyword_matches(text, EXAMPLE_MARKERS) > 0


def select_length_bucket(word_count: int) -> LengthBucket:
    selected = LENGTH_BUCKETS[0]
    for bucket in LENGTH_BUCKETS:
        if word_count >= bucket.min_words:
            selected = bucket
    return selected


def apply_technical_adjustment(score: float, feedback: str, transcript: str) -> Tuple[float, str, int]:
    """
    Keyword depth bonus/penalty for technical answers, plus the example bonus.
    Returns (score, feedback, keyword_matches).
    """
    matches = count_keyword_matches(transcript, TECHNICAL_KEYWORDS)
    if matches >= 3:
        score += 1.0
    elif matches == 0:
        score = max(MIN_SCORE, score - 2.0)
        feedback = FEEDBACK_NO_TECHNICAL_DEPTH

    if has_example_marker(transcript):
        score += 0.5

    return score, feedback, matches


def apply_behavioral_adjustment(score: float, transcript: str) -> Tuple[float, str, int, int]:
    """
    Behavioral keyword bonus and STAR structure bonus.
    Feedback always reflects STAR usage.
    Returns (score, feedback, keyword_matches, star_matches).
    """
    matches = count_keyword_matches(transcript, BEHAVIORAL_KEYWORDS)
    if matches >= 2:
        score += 1.0

    star_matches = count_keyword_matches(transcript, STAR_INDICATORS)
    if star_matches >= 2:
        score += 1.0
        feedback = FEEDBACK_STAR_USED
    else:
        feedback = FEEDBACK_STAR_MISSING

    return score, feedback, matches, star_matches


def round_score(value: float) -> float:
    """Round half-up to one decimal place."""
    return float(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def clamp_score(value: float) -> float:
    """Clamp into [1, 10] and round to one decimal place."""
    return round_score(max(MIN_SCORE, min(MAX_SCORE, value)))
