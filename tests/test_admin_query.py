import unittest
from datetime import datetime, timedelta, timezone

from packages.fri_history.dto import InterviewRecord, RecordStatus
from packages.fri_history.repository import MemoryHistoryRepository
from packages.fri_service.admin_query import AdminQueryService

START = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)


class TestAdminQueryService(unittest.TestCase):
    def setUp(self):
        repo = MemoryHistoryRepository()
        repo.save(InterviewRecord(
            interview_id="a", candidate_name="Alice Kim", job_role="Frontend Developer",
            date=START, overall_score=8.0, recommendation="Hire", status=RecordStatus.COMPLETED,
        ))
        repo.save(InterviewRecord(
            interview_id="b", candidate_name="Bob Lee", job_role="QA Engineer",
            date=START + timedelta(hours=1), overall_score=5.0, recommendation="No",
            status=RecordStatus.COMPLETED,
        ))
        repo.save(InterviewRecord(
            interview_id="c", candidate_name="Carol Park", job_role="Backend Developer",
            date=START + timedelta(hours=2),
        ))
        self.service = AdminQueryService(repo)

    def test_all_records_newest_first(self):
        self.assertEqual([r.interview_id for r in self.service.search()], ["c", "b", "a"])

    def test_search_by_name_or_role(self):
        self.assertEqual([r.interview_id for r in self.service.search("alice")], ["a"])
        self.assertEqual([r.interview_id for r in self.service.search("DEVELOPER")], ["c", "a"])
        self.assertEqual(self.service.search("nobody"), [])

    def test_paging(self):
        self.assertEqual([r.interview_id for r in self.service.search(limit=1, offset=1)], ["b"])

    def test_get_record(self):
        self.assertEqual(self.service.get_record("b").candidate_name, "Bob Lee")
        self.assertIsNone(self.service.get_record("zzz"))

    def test_stats(self):
        stats = self.service.get_stats()
        self.assertEqual(stats.total_interviews, 3)
        self.assertEqual(stats.completed_interviews, 2)
        self.assertEqual(stats.average_score, 6.5)

    def test_stats_without_records(self):
        stats = AdminQueryService(MemoryHistoryRepository()).get_stats()
        self.assertEqual(stats.total_interviews, 0)
        self.assertEqual(stats.average_score, 0.0)


if __name__ == "__main__":
    unittest.main()
