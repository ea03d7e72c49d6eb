import uuid
from contextlib import contextmanager
from typing import Optional

from packages.fri_core.errors import SessionNotFoundError
from packages.fri_core.logging import get_logger
from packages.fri_dto.interview import Candidate
from packages.fri_dto.session import AnswerResultDTO, SessionResponseDTO
from packages.fri_eval.engine import AnswerEvaluator
from packages.fri_history.dto import InterviewRecord, RecordStatus
from packages.fri_history.repository import HistoryRepository
from packages.fri_qbank.service import QuestionSelector
from packages.fri_report.dto import InterviewReport, Summary
from packages.fri_report.engine import ReportGenerator, SummaryGenerator
from packages.fri_service.concurrency import ConcurrencyManager
from packages.fri_service.mapper import SessionMapper
from packages.fri_session.dto import SessionContext
from packages.fri_session.engine import InterviewSessionEngine
from packages.fri_session.repository import SessionStateRepository

logger = get_logger("fri.service.session")


class SessionService:
    """
    Application service for interview sessions.
    Responsible for:
    1. Loading and saving session state (one context per session id)
    2. Concurrency control on commands (fail-fast lock)
    3. Orchestrating engine calls and keeping the admin listing current
    """
    def __init__(
        self,
        state_repo: SessionStateRepository,
        history_repo: HistoryRepository,
        selector: QuestionSelector,
        evaluator: AnswerEvaluator,
        summary_generator: SummaryGenerator,
        concurrency_manager: Optional[ConcurrencyManager] = None
    ):
        self.state_repo = state_repo
        self.history_repo = history_repo
        self.selector = selector
        self.evaluator = evaluator
        self.summary_generator = summary_generator
        self.concurrency_manager = concurrency_manager or ConcurrencyManager()

    def _engine(self, context: SessionContext) -> InterviewSessionEngine:
        return InterviewSessionEngine(
            context=context,
            evaluator=self.evaluator,
            summary_generator=self.summary_generator,
        )

    def _load(self, session_id: str) -> SessionContext:
        context = self.state_repo.get_state(session_id)
        if context is None:
            raise SessionNotFoundError(session_id)
        return context

    @contextmanager
    def _command(self, session_id: str):
        """
        Hold the session lock for one command and yield its loaded context.
        Locks of completed or unknown sessions are dropped afterwards.
        """
        try:
            with self.concurrency_manager.acquire_lock(session_id):
                yield self._load(session_id)
        finally:
            context = self.state_repo.get_state(session_id)
            if context is None or context.is_complete:
                self.concurrency_manager.discard(session_id)

    def create_session(self, candidate: Candidate) -> SessionResponseDTO:
        # No lock needed for creation as it's a new resource
        session_id = f"sess_{uuid.uuid4().hex[:12]}"
        questions = self.selector.select_questions(candidate)
        context = SessionContext(session_id=session_id, candidate=candidate, questions=questions)
        self.state_repo.save_state(session_id, context)

        self.history_repo.save(InterviewRecord(
            interview_id=session_id,
            candidate_name=candidate.name,
            job_role=candidate.job_role,
            date=context.created_at,
            status=RecordStatus.IN_PROGRESS,
        ))
        logger.info(f"Created session {session_id} for '{candidate.job_role}' ({len(questions)} questions)")
        return SessionMapper.to_dto(context)

    def get_session(self, session_id: str) -> Optional[SessionResponseDTO]:
        """
        Read-only operation. Bypasses lock.
        """
        context = self.state_repo.get_state(session_id)
        if context is None:
            return None
        return SessionMapper.to_dto(context)

    def record_transcript(self, session_id: str, fragment: str) -> SessionResponseDTO:
        with self._command(session_id) as context:
            self._engine(context).append_transcript(fragment)
            self.state_repo.save_state(session_id, context)
            return SessionMapper.to_dto(context)

    def submit_answer(self, session_id: str, transcript: Optional[str] = None) -> AnswerResultDTO:
        with self._command(session_id) as context:
            engine = self._engine(context)
            answer = engine.submit(transcript)
            self.state_repo.save_state(session_id, context)

            if engine.is_complete:
                self._record_completion(engine)

            return AnswerResultDTO(
                answer=SessionMapper.answer_to_dto(answer),
                session=SessionMapper.to_dto(context),
            )

    def retake(self, session_id: str) -> SessionResponseDTO:
        with self._command(session_id) as context:
            self._engine(context).retake()
            self.state_repo.save_state(session_id, context)
            return SessionMapper.to_dto(context)

    def get_summary(self, session_id: str) -> Summary:
        return self._engine(self._load(session_id)).summarize()

    def get_report(self, session_id: str) -> InterviewReport:
        context = self._load(session_id)
        summary = self._engine(context).summarize()
        return ReportGenerator.generate(context.candidate, context.questions, context.answers, summary)

    def _record_completion(self, engine: InterviewSessionEngine):
        context = engine.context
        summary = engine.summarize()
        self.history_repo.save(InterviewRecord(
            interview_id=context.session_id,
            candidate_name=context.candidate.name,
            job_role=context.candidate.job_role,
            date=context.created_at,
            overall_score=summary.final_rating,
            recommendation=summary.recommendation.value,
            status=RecordStatus.COMPLETED,
        ))
        logger.info(
            f"Session {context.session_id} completed: rating={summary.final_rating}, "
            f"recommendation={summary.recommendation.value}"
        )
