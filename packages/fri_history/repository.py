import abc
from typing import Dict, List, Optional

from packages.fri_core.logging import get_logger
from packages.fri_history.dto import InterviewRecord

logger = get_logger("fri.history")


class HistoryRepository(abc.ABC):
    """
    Abstract interface for the interview listing used by the admin view.
    """
    @abc.abstractmethod
    def save(self, record: InterviewRecord) -> None:
        """
        Insert or replace the record with the same interview_id.
        """
        pass

    @abc.abstractmethod
    def find_by_id(self, interview_id: str) -> Optional[InterviewRecord]:
        pass

    @abc.abstractmethod
    def find_all(self) -> List[InterviewRecord]:
        """
        All records, newest first.
        """
        pass


class MemoryHistoryRepository(HistoryRepository):
    """
    Process-local interview listing. Nothing is written to disk.
    """
    def __init__(self):
        self._records: Dict[str, InterviewRecord] = {}

    def save(self, record: InterviewRecord) -> None:
        action = "Updated" if record.interview_id in self._records else "Added"
        self._records[record.interview_id] = record
        logger.debug(f"{action} interview record {record.interview_id} ({record.status.value})")

    def find_by_id(self, interview_id: str) -> Optional[InterviewRecord]:
        return self._records.get(interview_id)

    def find_all(self) -> List[InterviewRecord]:
        return sorted(self._records.values(), key=lambda r: r.date, reverse=True)
