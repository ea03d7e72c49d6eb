from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class QuestionDTO(BaseModel):
    """
    Question as presented to the candidate.
    """
    id: int
    content: str
    type: str
    sequence_number: int


class AnswerDTO(BaseModel):
    question_id: int
    transcript: str
    score: float
    feedback: str


class SessionResponseDTO(BaseModel):
    """
    Snapshot of an interview session for callers outside the engine.
    """
    session_id: str
    status: str
    candidate_name: str
    job_role: str
    created_at: datetime
    completed_at: Optional[datetime] = None
    current_question: Optional[QuestionDTO] = None
    answered_questions: int
    total_questions: int
    progress_percentage: float
    has_pending_transcript: bool = False
    answers: List[AnswerDTO] = Field(default_factory=list)


class AnswerResultDTO(BaseModel):
    """
    Result of submitting an answer: the scored answer plus the updated session.
    """
    answer: AnswerDTO
    session: SessionResponseDTO
