from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

# --- Request Schemas ---

class CandidateCreateRequest(BaseModel):
    name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    job_role: str = Field(..., min_length=1)
    resume_text: str = Field(..., min_length=1, description="Pasted résumé text")

class AnswerSubmitRequest(BaseModel):
    transcript: Optional[str] = Field(
        default=None, description="Answer text; the recorded transcript is used when omitted"
    )

class TranscriptFragmentRequest(BaseModel):
    text: str

# --- Response Schemas ---

class QuestionSchema(BaseModel):
    id: int
    sequence: int
    content: str
    q_type: str  # "technical" | "behavioral"

class AnswerSchema(BaseModel):
    question_id: int
    transcript: str
    score: float
    feedback: str

class SessionResponse(BaseModel):
    session_id: str
    status: str
    candidate_name: str
    job_role: str
    current_question_index: int
    total_questions: int
    progress_percentage: float
    has_pending_transcript: bool = False
    current_question: Optional[QuestionSchema] = None
    answers: List[AnswerSchema] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

class AnswerResultResponse(BaseModel):
    answer: AnswerSchema
    session: SessionResponse

class SummaryResponse(BaseModel):
    strengths: str
    improvement_areas: str
    final_rating: float
    recommendation: str

class ReportExportResponse(BaseModel):
    path: str

class RoleListResponse(BaseModel):
    roles: List[str]
    roles_with_question_pool: List[str]

class InterviewRecordResponse(BaseModel):
    interview_id: str
    candidate_name: str
    job_role: str
    date: datetime
    overall_score: Optional[float] = None
    recommendation: Optional[str] = None
    status: str

class AdminStatsResponse(BaseModel):
    total_interviews: int
    completed_interviews: int
    average_score: float
