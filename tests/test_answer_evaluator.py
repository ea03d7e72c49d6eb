import random
import unittest

from packages.fri_core.errors import EmptyTranscriptError
from packages.fri_dto.interview import Question, QuestionCategory
from packages.fri_eval.engine import AnswerEvaluator
from packages.fri_eval.rules import (
    FEEDBACK_NO_TECHNICAL_DEPTH,
    FEEDBACK_STAR_MISSING,
    FEEDBACK_STAR_USED,
    LENGTH_BUCKETS,
    clamp_score,
    round_score,
    select_length_bucket,
)
from tests.support import FixedRandom, filler

TECHNICAL = Question(id=1, text="Explain the event loop.", category=QuestionCategory.TECHNICAL)
BEHAVIORAL = Question(id=5, text="Tell me about a challenge.", category=QuestionCategory.BEHAVIORAL)


def with_one_keyword(word_count: int) -> str:
    # "api" is the only technical keyword, so no depth bonus or penalty applies
    return "api " + filler(word_count - 1)


class TestLengthBuckets(unittest.TestCase):
    def setUp(self):
        self.evaluator = AnswerEvaluator(rng=FixedRandom(0.5))

    def test_bucket_boundaries(self):
        cases = [(19, 2.5), (20, 4.5), (49, 4.5), (50, 6.5), (99, 6.5), (100, 8.0)]
        for words, expected in cases:
            result = self.evaluator.evaluate(TECHNICAL, with_one_keyword(words))
            self.assertEqual(result.word_count, words)
            self.assertEqual(result.score, expected, f"{words} words")

    def test_bucket_feedback(self):
        for bucket in LENGTH_BUCKETS:
            words = max(bucket.min_words, 1)
            result = self.evaluator.evaluate(TECHNICAL, with_one_keyword(words))
            self.assertEqual(result.feedback, bucket.feedback)

    def test_select_length_bucket(self):
        self.assertEqual(select_length_bucket(0).min_words, 0)
        self.assertEqual(select_length_bucket(20).min_words, 20)
        self.assertEqual(select_length_bucket(500).min_words, 100)


class TestTechnicalAdjustment(unittest.TestCase):
    def setUp(self):
        self.evaluator = AnswerEvaluator(rng=FixedRandom(0.5))

    def test_three_keywords_add_a_point(self):
        text = "I build React component trees against an API " + filler(12)
        result = self.evaluator.evaluate(TECHNICAL, text)
        self.assertEqual(result.word_count, 20)
        self.assertEqual(result.keyword_matches, 3)
        self.assertEqual(result.score, 5.5)

    def test_no_keywords_penalized_with_floor(self):
        result = self.evaluator.evaluate(TECHNICAL, filler(10))
        self.assertEqual(result.keyword_matches, 0)
        self.assertEqual(result.score, 1.0)
        self.assertEqual(result.feedback, FEEDBACK_NO_TECHNICAL_DEPTH)

    def test_example_bonus_applies_without_keywords(self):
        result = self.evaluator.evaluate(TECHNICAL, "for example " + filler(8))
        self.assertTrue(result.has_example)
        self.assertEqual(result.score, 1.5)
        self.assertEqual(result.feedback, FEEDBACK_NO_TECHNICAL_DEPTH)


class TestBehavioralAdjustment(unittest.TestCase):
    def setUp(self):
        self.evaluator = AnswerEvaluator(rng=FixedRandom(0.5))

    def test_star_and_keywords(self):
        text = "The situation was a team challenge and the result " + filler(11)
        result = self.evaluator.evaluate(BEHAVIORAL, text)
        self.assertEqual(result.word_count, 20)
        self.assertGreaterEqual(result.keyword_matches, 2)
        self.assertGreaterEqual(result.star_matches, 2)
        self.assertEqual(result.score, 6.5)
        self.assertEqual(result.feedback, FEEDBACK_STAR_USED)

    def test_missing_star_feedback(self):
        result = self.evaluator.evaluate(BEHAVIORAL, filler(20))
        self.assertEqual(result.score, 4.5)
        self.assertEqual(result.feedback, FEEDBACK_STAR_MISSING)


class TestScoreRange(unittest.TestCase):
    def test_upper_clamp(self):
        evaluator = AnswerEvaluator(rng=FixedRandom(0.99))
        text = "For example the react component api " + filler(100)
        self.assertEqual(evaluator.evaluate(TECHNICAL, text).score, 10.0)

    def test_lower_clamp(self):
        evaluator = AnswerEvaluator(rng=FixedRandom(0.0))
        self.assertEqual(evaluator.evaluate(TECHNICAL, "no idea").score, 1.0)

    def test_scores_stay_in_range_with_one_decimal(self):
        evaluator = AnswerEvaluator(rng=random.Random(3))
        transcripts = ["ok", filler(30), "react api async " + filler(60), "for example " + filler(120)]
        for _ in range(50):
            for question in (TECHNICAL, BEHAVIORAL):
                for text in transcripts:
                    score = evaluator.evaluate(question, text).score
                    self.assertGreaterEqual(score, 1.0)
                    self.assertLessEqual(score, 10.0)
                    self.assertEqual(score, round(score, 1))

    def test_rounding_is_half_up(self):
        self.assertEqual(round_score(7.05), 7.1)
        self.assertEqual(round_score(2.25), 2.3)
        self.assertEqual(clamp_score(12.3), 10.0)
        self.assertEqual(clamp_score(-1), 1.0)


class TestEmptyTranscript(unittest.TestCase):
    def test_empty_and_whitespace_rejected(self):
        evaluator = AnswerEvaluator(rng=FixedRandom())
        for text in ("", "   \n\t"):
            with self.assertRaises(EmptyTranscriptError) as ctx:
                evaluator.evaluate(TECHNICAL, text)
            self.assertEqual(ctx.exception.code, "ANSWER_EMPTY")
            self.assertEqual(ctx.exception.details["question_id"], 1)


if __name__ == "__main__":
    unittest.main()
