import tempfile
import unittest

from fastapi.testclient import TestClient

from FRI.api import dependencies
from FRI.main import create_app
from packages.fri_eval.engine import AnswerEvaluator
from packages.fri_history.repository import MemoryHistoryRepository
from packages.fri_qbank.repository import StaticQuestionBankRepository
from packages.fri_qbank.service import QuestionSelector
from packages.fri_report.engine import SummaryGenerator
from packages.fri_report.sinks import JsonFileReportExporter
from packages.fri_service.admin_query import AdminQueryService
from packages.fri_service.concurrency import ConcurrencyManager
from packages.fri_service.session_service import SessionService
from packages.fri_session.infrastructure.memory_repo import MemorySessionRepository
from tests.support import FixedRandom, filler

CANDIDATE = {
    "name": "Jane Doe",
    "phone": "+1 555 123 4567",
    "job_role": "Frontend Developer",
    "resume_text": "Built dashboards in React",
}
ANSWER = "For example I built a React component library with an api layer " + filler(40)


class TestInterviewAPI(unittest.TestCase):
    def setUp(self):
        rng = FixedRandom()
        self.tmp = tempfile.TemporaryDirectory()
        self.manager = ConcurrencyManager()
        state_repo = MemorySessionRepository()
        history_repo = MemoryHistoryRepository()
        selector = QuestionSelector(StaticQuestionBankRepository(), rng=rng)
        evaluator = AnswerEvaluator(rng=rng)

        self.app = create_app()
        self.app.dependency_overrides[dependencies.get_session_service] = lambda: SessionService(
            state_repo=state_repo,
            history_repo=history_repo,
            selector=selector,
            evaluator=evaluator,
            summary_generator=SummaryGenerator(),
            concurrency_manager=self.manager,
        )
        self.app.dependency_overrides[dependencies.get_admin_query_service] = lambda: AdminQueryService(
            repository=history_repo
        )
        self.app.dependency_overrides[dependencies.get_report_exporter] = lambda: JsonFileReportExporter(
            base_dir=self.tmp.name
        )
        self.client = TestClient(self.app)

    def tearDown(self):
        self.app.dependency_overrides.clear()
        self.tmp.cleanup()

    def _create(self) -> str:
        response = self.client.post("/api/v1/sessions", json=CANDIDATE)
        self.assertEqual(response.status_code, 201)
        return response.json()["session_id"]

    def _complete(self, session_id: str):
        for _ in range(5):
            response = self.client.post(f"/api/v1/sessions/{session_id}/answers", json={"transcript": ANSWER})
            self.assertEqual(response.status_code, 200)
        return response

    def test_health(self):
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "ok")

    def test_roles(self):
        data = self.client.get("/api/v1/roles").json()
        self.assertEqual(len(data["roles"]), 10)
        self.assertIn("Frontend Developer", data["roles_with_question_pool"])

    def test_create_session(self):
        response = self.client.post("/api/v1/sessions", json=CANDIDATE)
        self.assertEqual(response.status_code, 201)
        data = response.json()
        self.assertEqual(data["status"], "AWAITING_ANSWER")
        self.assertEqual(data["total_questions"], 5)
        self.assertEqual(data["current_question_index"], 1)
        self.assertTrue(data["current_question"]["content"].startswith("I see you have experience with react"))
        self.assertEqual(data["current_question"]["q_type"], "technical")

    def test_create_session_requires_every_field(self):
        response = self.client.post("/api/v1/sessions", json={**CANDIDATE, "phone": ""})
        self.assertEqual(response.status_code, 422)

    def test_unknown_session(self):
        self.assertEqual(self.client.get("/api/v1/sessions/missing").status_code, 404)
        response = self.client.post("/api/v1/sessions/missing/answers", json={"transcript": "hi"})
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["detail"]["code"], "SESSION_NOT_FOUND")

    def test_empty_answer(self):
        session_id = self._create()
        response = self.client.post(f"/api/v1/sessions/{session_id}/answers", json={"transcript": "   "})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"]["code"], "ANSWER_EMPTY")

        response = self.client.post(f"/api/v1/sessions/{session_id}/answers", json={})
        self.assertEqual(response.status_code, 400)

    def test_recorded_transcript_submit(self):
        session_id = self._create()
        self.client.post(f"/api/v1/sessions/{session_id}/transcript", json={"text": "first"})
        response = self.client.post(f"/api/v1/sessions/{session_id}/retake")
        self.assertEqual(response.status_code, 200)
        self.assertFalse(response.json()["has_pending_transcript"])

        self.client.post(f"/api/v1/sessions/{session_id}/transcript", json={"text": "second take"})
        response = self.client.post(f"/api/v1/sessions/{session_id}/answers", json={})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["answer"]["transcript"], "second take")

    def test_full_interview(self):
        session_id = self._create()
        response = self._complete(session_id)
        self.assertEqual(response.json()["session"]["status"], "COMPLETE")

        summary = self.client.get(f"/api/v1/sessions/{session_id}/summary")
        self.assertEqual(summary.status_code, 200)
        self.assertIn(summary.json()["recommendation"], ("Hire", "Maybe", "No"))

        report = self.client.get(f"/api/v1/sessions/{session_id}/report").json()
        self.assertEqual(report["interview"]["questionCount"], 5)
        self.assertIn("improvementAreas", report["summary"])
        self.assertEqual(report["candidate"]["role"], "Frontend Developer")

        exported = self.client.post(f"/api/v1/sessions/{session_id}/report/export")
        self.assertEqual(exported.status_code, 200)
        self.assertTrue(exported.json()["path"].startswith(self.tmp.name))

    def test_export_with_slash_in_name(self):
        response = self.client.post("/api/v1/sessions", json={**CANDIDATE, "name": "Jane/Doe"})
        session_id = response.json()["session_id"]
        self._complete(session_id)

        exported = self.client.post(f"/api/v1/sessions/{session_id}/report/export")
        self.assertEqual(exported.status_code, 200)
        self.assertIn("interview-report-jane-doe-", exported.json()["path"])

    def test_completed_session_rejects_changes(self):
        session_id = self._create()
        self._complete(session_id)
        response = self.client.post(f"/api/v1/sessions/{session_id}/answers", json={"transcript": ANSWER})
        self.assertEqual(response.status_code, 409)
        self.assertEqual(self.client.post(f"/api/v1/sessions/{session_id}/retake").status_code, 409)

    def test_summary_before_completion(self):
        session_id = self._create()
        self.assertEqual(self.client.get(f"/api/v1/sessions/{session_id}/summary").status_code, 409)
        self.assertEqual(self.client.get(f"/api/v1/sessions/{session_id}/report").status_code, 409)

    def test_locked_session(self):
        session_id = self._create()
        with self.manager.acquire_lock(session_id):
            response = self.client.post(f"/api/v1/sessions/{session_id}/answers", json={"transcript": ANSWER})
        self.assertEqual(response.status_code, 423)

    def test_admin_listing(self):
        first = self._create()
        self._complete(first)
        self._create()

        records = self.client.get("/api/v1/admin/interviews", params={"search": "jane"}).json()
        self.assertEqual(len(records), 2)
        self.assertEqual(
            sorted(r["status"] for r in records), ["completed", "in-progress"]
        )
        self.assertEqual(self.client.get(f"/api/v1/admin/interviews/{first}").status_code, 200)
        self.assertEqual(self.client.get("/api/v1/admin/interviews/missing").status_code, 404)

        stats = self.client.get("/api/v1/admin/stats").json()
        self.assertEqual(stats["total_interviews"], 2)
        self.assertEqual(stats["completed_interviews"], 1)
        self.assertGreater(stats["average_score"], 0)


if __name__ == "__main__":
    unittest.main()
