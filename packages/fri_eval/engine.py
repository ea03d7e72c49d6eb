import random
from typing import Optional

from packages.fri_core.errors import EmptyTranscriptError
from packages.fri_core.logging import get_logger
from packages.fri_dto.interview import Question, QuestionCategory
from .rules import (
    JITTER_SPAN,
    apply_behavioral_adjustment,
    apply_technical_adjustment,
    clamp_score,
    count_words,
    has_example_marker,
    select_length_bucket,
)
from .schema import EvaluationResult

logger = get_logger("fri.eval")


class AnswerEvaluator:
    """
    Heuristic answer scoring.

    The base score is drawn uniformly inside the answer's length bucket and a
    symmetric jitter is added at the end; both model evaluator noise. The random
    source only needs a random() method returning floats in [0, 1).
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def _draw(self, low: float, high: float) -> float:
        return low + (high - low) * self.rng.random()

    def evaluate(self, question: Question, transcript: str) -> EvaluationResult:
        text = (transcript or "").strip()
        if not text:
            raise EmptyTranscriptError(details={"question_id": question.id})

        # 1. Length bucket
        word_count = count_words(text)
        bucket = select_length_bucket(word_count)
        base_score = self._draw(bucket.low, bucket.high)
        score = base_score
        feedback = bucket.feedback

        # 2. Category adjustment
        keyword_matches = 0
        star_matches = 0
        if question.category == QuestionCategory.TECHNICAL:
            score, feedback, keyword_matches = apply_technical_adjustment(score, feedback, text)
        else:
            score, feedback, keyword_matches, star_matches = apply_behavioral_adjustment(score, text)

        # 3. Jitter, clamp, round
        score += self._draw(-JITTER_SPAN, JITTER_SPAN)
        final_score = clamp_score(score)

        logger.debug(
            f"Q{question.id} ({question.category.value}): words={word_count}, "
            f"base={base_score:.2f}, keywords={keyword_matches}, star={star_matches}, "
            f"score={final_score}"
        )

        return EvaluationResult(
            score=final_score,
            feedback=feedback,
            word_count=word_count,
            base_score=base_score,
            keyword_matches=keyword_matches,
            star_matches=star_matches,
            has_example=has_example_marker(text),
        )
