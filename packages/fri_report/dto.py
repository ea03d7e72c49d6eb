from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Recommendation(str, Enum):
    HIRE = "Hire"
    MAYBE = "Maybe"
    NO = "No"


class SummaryStatistics(BaseModel):
    """
    Aggregate signals computed from a completed session.
    """
    average_score: float
    technical_avg: float = Field(..., description="0 when no technical answers")
    behavioral_avg: float = Field(..., description="0 when no behavioral answers")
    avg_word_count: float
    score_variance: float = Field(..., description="max(score) - min(score)")
    short_answer_count: int = Field(..., description="Answers under 30 words")
    low_score_count: int = Field(..., description="Answers scored under 5")


class Summary(BaseModel):
    """
    Candidate-level outcome of an interview.
    Derived from the answers; recomputed on demand.
    """
    model_config = ConfigDict(frozen=True)

    strengths: str
    improvement_areas: str
    final_rating: float = Field(..., ge=1.0, le=10.0)
    recommendation: Recommendation


# -------------------------------------------------------------------------
# Export document
# Field aliases are the camelCase keys of the exported JSON document.
# -------------------------------------------------------------------------
class ExportModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ReportCandidate(ExportModel):
    name: str
    phone: str
    role: str


class ReportInterview(ExportModel):
    date: str = Field(..., description="ISO-8601 timestamp of report generation")
    question_count: int = Field(..., alias="questionCount")
    total_score: str = Field(..., alias="totalScore", description="'<sum>/<max>'")
    average_score: float = Field(..., alias="averageScore")
    recommendation: Recommendation


class ReportSummary(ExportModel):
    strengths: str
    improvement_areas: str = Field(..., alias="improvementAreas")


class ReportAnswer(ExportModel):
    question: str
    type: str
    score: float
    feedback: str
    transcript: str


class InterviewReport(ExportModel):
    """
    Final output document handed to report sinks.
    """
    candidate: ReportCandidate
    interview: ReportInterview
    summary: ReportSummary
    answers: List[ReportAnswer]

    def to_document(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
