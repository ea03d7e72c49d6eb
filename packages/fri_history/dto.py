from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class RecordStatus(str, Enum):
    COMPLETED = "completed"
    IN_PROGRESS = "in-progress"
    SCHEDULED = "scheduled"


class InterviewRecord(BaseModel):
    """
    Row of the admin interview listing.
    """
    interview_id: str = Field(..., description="Session id of the interview")
    candidate_name: str
    job_role: str
    date: datetime = Field(..., description="When the interview started")
    overall_score: Optional[float] = Field(default=None, description="Final rating once completed")
    recommendation: Optional[str] = Field(default=None)
    status: RecordStatus = RecordStatus.IN_PROGRESS


class AdminStats(BaseModel):
    total_interviews: int
    completed_interviews: int
    average_score: float = Field(..., description="Mean overall score of scored interviews, 0 when none")
