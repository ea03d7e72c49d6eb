import json
import os
import random
import tempfile
import unittest

from packages.fri_core.errors import ConfigurationError
from packages.fri_dto.interview import QuestionCategory
from packages.fri_qbank.bank import DEFAULT_POOL, JOB_ROLES, builtin_pools
from packages.fri_qbank.domain import QuestionPool
from packages.fri_qbank.repository import JsonFileQuestionBankRepository, StaticQuestionBankRepository
from packages.fri_qbank.service import QuestionSelector, find_resume_keywords, personalize
from tests.support import FixedRandom, make_candidate


class TestQuestionSelector(unittest.TestCase):
    def setUp(self):
        self.repository = StaticQuestionBankRepository()
        self.selector = QuestionSelector(self.repository, rng=FixedRandom())

    def test_known_role_draws_four_technical_then_one_behavioral(self):
        pool = builtin_pools()["Frontend Developer"]
        questions = self.selector.select_questions(make_candidate("Frontend Developer"))

        self.assertEqual([q.id for q in questions], [1, 2, 3, 4, 5])
        self.assertEqual(
            [q.category for q in questions],
            [QuestionCategory.TECHNICAL] * 4 + [QuestionCategory.BEHAVIORAL],
        )
        self.assertEqual([q.text for q in questions[:4]], list(pool.technical[:4]))
        self.assertEqual(questions[4].text, pool.behavioral[0])

    def test_unknown_role_uses_default_pool(self):
        questions = self.selector.select_questions(make_candidate("Astronaut"))
        self.assertEqual(len(questions), 5)
        for q in questions[:4]:
            self.assertIn(q.text, DEFAULT_POOL.technical)
        self.assertIn(questions[4].text, DEFAULT_POOL.behavioral)

    def test_every_offered_role_gets_a_full_set(self):
        for role in JOB_ROLES:
            questions = self.selector.select_questions(make_candidate(role))
            self.assertEqual(len(questions), 5, role)

    def test_undersized_pool_falls_back_to_default(self):
        small = QuestionPool(role="Tiny", technical=("Only one?", "Only two?"), behavioral=("Why?",))
        selector = QuestionSelector(StaticQuestionBankRepository({"Tiny": small}), rng=FixedRandom())
        questions = selector.select_questions(make_candidate("Tiny"))
        self.assertEqual([q.text for q in questions[:4]], list(DEFAULT_POOL.technical[:4]))

    def test_resume_keywords_personalize_first_question_only(self):
        pool = builtin_pools()["Frontend Developer"]
        candidate = make_candidate("Frontend Developer", resume_text="Built dashboards in React and JavaScript")
        questions = self.selector.select_questions(candidate)

        self.assertTrue(questions[0].text.startswith("I see you have experience with react, javascript"))
        self.assertTrue(questions[0].text.endswith(pool.technical[0]))
        self.assertEqual(questions[1].text, pool.technical[1])

    def test_resume_without_keywords_leaves_questions_unchanged(self):
        pool = builtin_pools()["Frontend Developer"]
        questions = self.selector.select_questions(make_candidate("Frontend Developer", resume_text="Gardener"))
        self.assertEqual(questions[0].text, pool.technical[0])

    def test_seeded_selection_is_reproducible(self):
        first = QuestionSelector(self.repository, rng=random.Random(42)).select_questions(make_candidate())
        second = QuestionSelector(self.repository, rng=random.Random(42)).select_questions(make_candidate())
        self.assertEqual([q.text for q in first], [q.text for q in second])

    def test_shuffling_does_not_touch_the_bank(self):
        before = builtin_pools()["Frontend Developer"]
        QuestionSelector(self.repository, rng=random.Random(7)).select_questions(make_candidate())
        self.assertEqual(self.repository.find_pool("Frontend Developer"), before)

    def test_counts_larger_than_default_pool_are_rejected(self):
        with self.assertRaises(ConfigurationError):
            QuestionSelector(self.repository, technical_count=10)


class TestResumeKeywords(unittest.TestCase):
    def test_keywords_follow_list_order_without_duplicates(self):
        found = find_resume_keywords("Docker, python, Python and AWS")
        self.assertEqual(found, ["python", "docker", "aws"])

    def test_personalize_names_at_most_three_keywords(self):
        text = personalize("Tell me more.", ["react", "vue", "python", "docker"])
        self.assertEqual(text, "I see you have experience with react, vue, python. Tell me more.")

    def test_personalize_without_keywords(self):
        self.assertEqual(personalize("Tell me more.", []), "Tell me more.")


class TestJsonFileQuestionBank(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmp.name, "questions.json")
        data = {
            "Data Engineer": {
                "technical": ["T1?", "T2?", "T3?", "T4?", "T5?"],
                "behavioral": ["B1?"],
            },
            "Half Baked": {"technical": ["T1?"], "behavioral": ["B1?"]},
        }
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f)

    def tearDown(self):
        self.tmp.cleanup()

    def test_loads_pools_and_skips_undersized_ones(self):
        repo = JsonFileQuestionBankRepository(self.path)
        self.assertEqual(repo.list_roles(), ["Data Engineer"])
        self.assertEqual(len(repo.find_pool("Data Engineer").technical), 5)
        self.assertIsNone(repo.find_pool("Half Baked"))

    def test_missing_file_raises(self):
        with self.assertRaises(FileNotFoundError):
            JsonFileQuestionBankRepository(os.path.join(self.tmp.name, "missing.json"))


if __name__ == "__main__":
    unittest.main()
