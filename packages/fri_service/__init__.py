from .admin_query import AdminQueryService
from .concurrency import ConcurrencyManager
from .interview_runner import InterviewRunner
from .mapper import SessionMapper
from .session_service import SessionService

__all__ = [
    "AdminQueryService",
    "ConcurrencyManager",
    "InterviewRunner",
    "SessionMapper",
    "SessionService",
]
