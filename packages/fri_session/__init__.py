from .dto import SessionContext
from .engine import InterviewSessionEngine
from .flow import InterviewFlow
from .state import InterviewStage, SessionEvent, SessionStatus

__all__ = [
    "SessionContext",
    "InterviewSessionEngine",
    "InterviewFlow",
    "InterviewStage",
    "SessionEvent",
    "SessionStatus",
]
