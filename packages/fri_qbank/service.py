import random
from typing import List, Optional

from packages.fri_core.errors import ConfigurationError
from packages.fri_core.logging import get_logger
from packages.fri_dto.interview import Candidate, Question, QuestionCategory
from .bank import DEFAULT_POOL, TECHNOLOGY_KEYWORDS
from .domain import QuestionPool
from .repository_interface import QuestionBankRepository

logger = get_logger("fri.qbank.service")

MAX_PERSONALIZED_KEYWORDS = 3


def find_resume_keywords(resume_text: str, keywords=TECHNOLOGY_KEYWORDS) -> List[str]:
    """
    Technology keywords found in the résumé (case-insensitive substring match),
    deduplicated and in keyword-list order.
    """
    resume_lower = resume_text.lower()
    found: List[str] = []
    for keyword in keywords:
        if keyword in resume_lower and keyword not in found:
            found.append(keyword)
    return found


def personalize(text: str, keywords: List[str]) -> str:
    if not keywords:
        return text
    tech_list = ", ".join(keywords[:MAX_PERSONALIZED_KEYWORDS])
    return f"I see you have experience with {tech_list}. {text}"


class QuestionSelector:
    """
    Builds the fixed-size question set for a session.

    Technical and behavioral pools are shuffled independently; the first
    technical_count technical and behavioral_count behavioral questions are kept,
    in that order, with ids 1..N. Unknown roles use the default pool.
    """

    def __init__(
        self,
        repository: QuestionBankRepository,
        rng: Optional[random.Random] = None,
        technical_count: int = 4,
        behavioral_count: int = 1,
        default_pool: QuestionPool = DEFAULT_POOL
    ):
        if not default_pool.can_supply(technical_count, behavioral_count):
            raise ConfigurationError(
                "Default question pool cannot fill the configured question counts",
                details={"technical": technical_count, "behavioral": behavioral_count}
            )
        self.repository = repository
        self.rng = rng or random.Random()
        self.technical_count = technical_count
        self.behavioral_count = behavioral_count
        self.default_pool = default_pool

    def _resolve_pool(self, job_role: str) -> QuestionPool:
        pool = self.repository.find_pool(job_role)
        if pool is None or not pool.can_supply(self.technical_count, self.behavioral_count):
            logger.info(f"No question pool for role '{job_role}', using default pool")
            return self.default_pool
        return pool

    def _draw(self, pool: QuestionPool, category: QuestionCategory, count: int) -> List[str]:
        # Shuffle a copy; the bank itself is shared between sessions
        texts = list(pool.texts(category))
        self.rng.shuffle(texts)
        return texts[:count]

    def select_questions(self, candidate: Candidate) -> List[Question]:
        pool = self._resolve_pool(candidate.job_role)

        drawn = [
            (text, QuestionCategory.TECHNICAL)
            for text in self._draw(pool, QuestionCategory.TECHNICAL, self.technical_count)
        ] + [
            (text, QuestionCategory.BEHAVIORAL)
            for text in self._draw(pool, QuestionCategory.BEHAVIORAL, self.behavioral_count)
        ]

        keywords = find_resume_keywords(candidate.resume_text)
        questions: List[Question] = []
        for index, (text, category) in enumerate(drawn, start=1):
            if index == 1:
                text = personalize(text, keywords)
            questions.append(Question(id=index, text=text, category=category))

        logger.debug(
            f"Selected {len(questions)} questions for role '{candidate.job_role}' "
            f"(pool={pool.role}, resume keywords={keywords[:MAX_PERSONALIZED_KEYWORDS]})"
        )
        return questions
