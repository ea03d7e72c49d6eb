from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field

from packages.fri_dto.interview import Answer, Candidate, Question
from .state import SessionStatus


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SessionContext(BaseModel):
    """
    Runtime state of one interview session.
    Mutated only through InterviewSessionEngine.
    """
    session_id: str
    candidate: Candidate
    questions: List[Question] = Field(..., min_length=1)
    answers: List[Answer] = Field(default_factory=list)
    cursor: int = Field(default=0, ge=0, description="Index of the current question")
    status: SessionStatus = SessionStatus.AWAITING_ANSWER
    pending_transcript: str = Field(default="", description="Transcript captured but not yet submitted")
    created_at: datetime = Field(default_factory=_utcnow)
    completed_at: Optional[datetime] = None

    @property
    def question_count(self) -> int:
        return len(self.questions)

    @property
    def current_question(self) -> Optional[Question]:
        if self.cursor >= len(self.questions):
            return None
        return self.questions[self.cursor]

    @property
    def is_complete(self) -> bool:
        return self.status == SessionStatus.COMPLETE
