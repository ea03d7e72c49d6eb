from enum import Enum

from pydantic import ConfigDict, Field

from packages.fri_core.dto import BaseDTO


class QuestionCategory(str, Enum):
    """
    Category of an interview question.
    """
    TECHNICAL = "technical"
    BEHAVIORAL = "behavioral"


class FrozenDTO(BaseDTO):
    """DTO that cannot be mutated after creation."""
    model_config = ConfigDict(frozen=True)


class Candidate(FrozenDTO):
    """
    Candidate data collected by the intake form.
    All fields are required and must be non-empty after stripping.
    """
    name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    job_role: str = Field(..., min_length=1)
    resume_text: str = Field(..., min_length=1)


class Question(FrozenDTO):
    """
    A question presented during the session.
    Ids are sequential within a session, starting at 1.
    """
    id: int = Field(..., ge=1)
    text: str = Field(..., min_length=1)
    category: QuestionCategory


class Answer(FrozenDTO):
    """
    A scored answer. Created once per question, in question order.
    """
    question_id: int = Field(..., ge=1)
    transcript: str
    score: float = Field(..., ge=1.0, le=10.0)
    feedback: str
