from enum import Enum


class SessionStatus(str, Enum):
    """
    Interview session status.
    AWAITING_ANSWER -> EVALUATING -> AWAITING_ANSWER | COMPLETE
    """
    AWAITING_ANSWER = "AWAITING_ANSWER"
    EVALUATING = "EVALUATING"
    COMPLETE = "COMPLETE"


class SessionEvent(str, Enum):
    """
    Events emitted by the session engine (logged, forwarded by callers).
    """
    ANSWER_SUBMITTED = "ANSWER_SUBMITTED"
    ANSWER_REJECTED = "ANSWER_REJECTED"
    ANSWER_RETAKEN = "ANSWER_RETAKEN"
    SESSION_COMPLETED = "SESSION_COMPLETED"


class InterviewStage(str, Enum):
    """
    Top-level stage of the interview application.
    """
    FORM = "FORM"
    INTERVIEW = "INTERVIEW"
    SUMMARY = "SUMMARY"
    ADMIN = "ADMIN"
