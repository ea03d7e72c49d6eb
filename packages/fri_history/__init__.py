from .dto import AdminStats, InterviewRecord, RecordStatus
from .repository import HistoryRepository, MemoryHistoryRepository

__all__ = ["AdminStats", "InterviewRecord", "RecordStatus", "HistoryRepository", "MemoryHistoryRepository"]
