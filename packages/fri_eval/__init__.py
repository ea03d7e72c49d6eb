from .engine import AnswerEvaluator
from .schema import EvaluationResult

__all__ = ["AnswerEvaluator", "EvaluationResult"]
