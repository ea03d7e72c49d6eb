from .bank import DEFAULT_POOL, JOB_ROLES, TECHNOLOGY_KEYWORDS
from .domain import QuestionPool
from .repository import JsonFileQuestionBankRepository, StaticQuestionBankRepository
from .service import QuestionSelector

__all__ = [
    "DEFAULT_POOL",
    "JOB_ROLES",
    "TECHNOLOGY_KEYWORDS",
    "QuestionPool",
    "JsonFileQuestionBankRepository",
    "StaticQuestionBankRepository",
    "QuestionSelector",
]
