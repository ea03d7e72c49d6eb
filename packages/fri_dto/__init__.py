from .interview import Answer, Candidate, Question, QuestionCategory

__all__ = ["Answer", "Candidate", "Question", "QuestionCategory"]
