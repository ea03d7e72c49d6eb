from datetime import datetime, timezone
from typing import Optional

from packages.fri_core.errors import EmptyTranscriptError, InvalidStateError
from packages.fri_core.logging import get_logger
from packages.fri_dto.interview import Answer
from packages.fri_eval.engine import AnswerEvaluator
from packages.fri_report.dto import Summary
from packages.fri_report.engine import SummaryGenerator
from .dto import SessionContext
from .state import SessionEvent, SessionStatus

logger = get_logger("fri.session")


class InterviewSessionEngine:
    """
    Core logic for one interview session.
    Owns the cursor and the append-only answer sequence; every state change
    goes through submit() or retake().
    """
    def __init__(
        self,
        context: SessionContext,
        evaluator: AnswerEvaluator,
        summary_generator: Optional[SummaryGenerator] = None
    ):
        self.context = context
        self.evaluator = evaluator
        self.summary_generator = summary_generator or SummaryGenerator()

    @property
    def session_id(self) -> str:
        return self.context.session_id

    @property
    def status(self) -> SessionStatus:
        return self.context.status

    @property
    def is_complete(self) -> bool:
        return self.context.is_complete

    @property
    def current_question(self):
        return self.context.current_question

    def _require_awaiting(self, operation: str):
        if self.context.status != SessionStatus.AWAITING_ANSWER:
            raise InvalidStateError(
                f"Cannot {operation} in status {self.context.status.value}",
                details={"session_id": self.session_id, "status": self.context.status.value}
            )

    def append_transcript(self, fragment: str):
        """
        Add a final speech fragment to the transcript of the current question.
        """
        self._require_awaiting("record an answer")
        fragment = fragment.strip()
        if not fragment:
            return
        if self.context.pending_transcript:
            self.context.pending_transcript = f"{self.context.pending_transcript} {fragment}"
        else:
            self.context.pending_transcript = fragment

    def retake(self):
        """
        Discard the un-submitted transcript of the current question.
        """
        self._require_awaiting("retake an answer")
        self.context.pending_transcript = ""
        logger.info(f"Event: {SessionEvent.ANSWER_RETAKEN.value} for {self.session_id} (Q{self.current_question.id})")

    def submit(self, transcript: Optional[str] = None) -> Answer:
        """
        Score the answer to the current question and advance the cursor.
        Uses the pending transcript when none is given.
        """
        self._require_awaiting("submit an answer")

        text = (transcript if transcript is not None else self.context.pending_transcript).strip()
        question = self.context.current_question
        if not text:
            logger.warning(f"Event: {SessionEvent.ANSWER_REJECTED.value} for {self.session_id} (Q{question.id}): empty transcript")
            raise EmptyTranscriptError(details={"session_id": self.session_id, "question_id": question.id})

        self.context.status = SessionStatus.EVALUATING
        try:
            result = self.evaluator.evaluate(question, text)
        except Exception:
            self.context.status = SessionStatus.AWAITING_ANSWER
            logger.error(f"Evaluation failed for {self.session_id} (Q{question.id})")
            raise

        answer = Answer(
            question_id=question.id,
            transcript=text,
            score=result.score,
            feedback=result.feedback,
        )
        self.context.answers.append(answer)
        self.context.cursor += 1
        self.context.pending_transcript = ""
        logger.info(
            f"Event: {SessionEvent.ANSWER_SUBMITTED.value} for {self.session_id} "
            f"(Q{question.id}, score={answer.score}, {self.context.cursor}/{self.context.question_count})"
        )

        if self.context.cursor >= self.context.question_count:
            self.context.status = SessionStatus.COMPLETE
            self.context.completed_at = datetime.now(timezone.utc)
            logger.info(f"Event: {SessionEvent.SESSION_COMPLETED.value} for {self.session_id}")
        else:
            self.context.status = SessionStatus.AWAITING_ANSWER

        return answer

    def summarize(self) -> Summary:
        """
        Summary of a completed session, computed fresh from its answers.
        """
        if not self.is_complete:
            raise InvalidStateError(
                "Summary is only available once every question is answered",
                details={
                    "session_id": self.session_id,
                    "answered": len(self.context.answers),
                    "questions": self.context.question_count,
                }
            )
        return self.summary_generator.summarize(self.context.questions, self.context.answers)
