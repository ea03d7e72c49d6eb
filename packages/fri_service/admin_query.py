from typing import List, Optional

from packages.fri_history.dto import AdminStats, InterviewRecord, RecordStatus
from packages.fri_history.repository import HistoryRepository


class AdminQueryService:
    """
    Read-only service for the admin view.
    Reads the interview listing directly; no domain logic, no locking.
    """
    def __init__(self, repository: HistoryRepository):
        self.repository = repository

    def search(self, term: str = "", limit: int = 100, offset: int = 0) -> List[InterviewRecord]:
        """
        Records whose candidate name or job role contains term (case-insensitive), newest first.
        """
        needle = term.strip().lower()
        records = self.repository.find_all()
        if needle:
            records = [
                r for r in records
                if needle in r.candidate_name.lower() or needle in r.job_role.lower()
            ]
        return records[offset:offset + limit]

    def get_record(self, interview_id: str) -> Optional[InterviewRecord]:
        return self.repository.find_by_id(interview_id)

    def get_stats(self) -> AdminStats:
        records = self.repository.find_all()
        scored = [r.overall_score for r in records if r.overall_score is not None and r.overall_score > 0]
        average = round(sum(scored) / len(scored), 1) if scored else 0.0
        return AdminStats(
            total_interviews=len(records),
            completed_interviews=sum(1 for r in records if r.status == RecordStatus.COMPLETED),
            average_score=average,
        )
