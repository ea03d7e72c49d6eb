from pydantic import BaseModel, Field


class EvaluationResult(BaseModel):
    """
    Score and feedback for a single answer, with the signals that produced them.
    """
    score: float = Field(..., ge=1.0, le=10.0, description="Final score 1-10, one decimal")
    feedback: str = Field(..., description="Short feedback for the candidate")
    word_count: int = Field(..., ge=0, description="Whitespace-delimited tokens in the transcript")
    base_score: float = Field(..., description="Score drawn from the length bucket before adjustments")
    keyword_matches: int = Field(0, description="Category keyword matches")
    star_matches: int = Field(0, description="STAR indicator matches (behavioral only)")
    has_example: bool = Field(False, description="Whether an example marker was found")
