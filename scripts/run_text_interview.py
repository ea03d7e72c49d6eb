"""
Console interview: questions are printed, answers are typed.
Usage: python scripts/run_text_interview.py
"""
import asyncio
import os
import random
import sys
from typing import AsyncIterator

# Ensure project root is in path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from packages.fri_core.config import FRIConfig
from packages.fri_core.dto import TranscriptChunkDTO
from packages.fri_core.errors import FRIBaseError
from packages.fri_core.logging import get_logger
from packages.fri_dto.interview import Candidate
from packages.fri_eval.engine import AnswerEvaluator
from packages.fri_providers.speech.base import ISpeechIO
from packages.fri_qbank.bank import JOB_ROLES
from packages.fri_qbank.repository import JsonFileQuestionBankRepository, StaticQuestionBankRepository
from packages.fri_qbank.service import QuestionSelector
from packages.fri_report.engine import ReportGenerator, SummaryGenerator
from packages.fri_report.sinks import JsonFileReportExporter, TelLinkContactSink
from packages.fri_service.interview_runner import InterviewRunner
from packages.fri_session.dto import SessionContext
from packages.fri_session.engine import InterviewSessionEngine
from packages.fri_session.flow import InterviewFlow

logger = get_logger("fri.scripts.text_interview")


class ConsoleSpeechIO(ISpeechIO):
    """
    Typed stand-in for speech: one line of input is one final transcript chunk.
    """
    async def transcribe(self) -> AsyncIterator[TranscriptChunkDTO]:
        line = await asyncio.to_thread(input, "> ")
        yield TranscriptChunkDTO(text=line, is_final=True)

    async def speak(self, text: str) -> None:
        print(f"\nInterviewer: {text}")


def _ask(prompt: str) -> str:
    while True:
        value = input(f"{prompt}: ").strip()
        if value:
            return value


def read_candidate() -> Candidate:
    print("Available roles:")
    for index, role in enumerate(JOB_ROLES, start=1):
        print(f"  {index}. {role}")
    choice = _ask("Job role (number or name)")
    if choice.isdigit() and 1 <= int(choice) <= len(JOB_ROLES):
        choice = JOB_ROLES[int(choice) - 1]

    return Candidate(
        name=_ask("Full name"),
        phone=_ask("Phone"),
        job_role=choice,
        resume_text=_ask("Résumé (one line)"),
    )


def build_engine(config: FRIConfig, candidate: Candidate) -> InterviewSessionEngine:
    rng = random.Random(config.RANDOM_SEED) if config.RANDOM_SEED is not None else random.Random()
    if config.QUESTION_BANK_PATH:
        repository = JsonFileQuestionBankRepository(
            config.QUESTION_BANK_PATH,
            technical_count=config.TECHNICAL_QUESTION_COUNT,
            behavioral_count=config.BEHAVIORAL_QUESTION_COUNT,
        )
    else:
        repository = StaticQuestionBankRepository()

    selector = QuestionSelector(
        repository,
        rng=rng,
        technical_count=config.TECHNICAL_QUESTION_COUNT,
        behavioral_count=config.BEHAVIORAL_QUESTION_COUNT,
    )
    context = SessionContext(
        session_id="console",
        candidate=candidate,
        questions=selector.select_questions(candidate),
    )
    return InterviewSessionEngine(
        context,
        evaluator=AnswerEvaluator(rng=rng),
        summary_generator=SummaryGenerator(config.HIRE_THRESHOLD, config.MAYBE_THRESHOLD),
    )


async def main():
    config = FRIConfig.load()
    flow = InterviewFlow()

    candidate = read_candidate()
    engine = build_engine(config, candidate)
    flow.start_interview()

    runner = InterviewRunner(engine, ConsoleSpeechIO(), max_attempts=config.MAX_CAPTURE_ATTEMPTS)
    summary = await runner.run()
    flow.complete_interview()

    print("\n=== Interview summary ===")
    for answer in engine.context.answers:
        print(f"Q{answer.question_id}: {answer.score}/10 - {answer.feedback}")
    print(f"\nStrengths: {summary.strengths}")
    print(f"Areas for improvement: {summary.improvement_areas}")
    print(f"Final rating: {summary.final_rating}/10 ({summary.recommendation.value})")

    report = ReportGenerator.generate(candidate, engine.context.questions, engine.context.answers, summary)
    path = JsonFileReportExporter(config.REPORT_EXPORT_DIR).export(report)
    print(f"Report saved to {path}")
    print(f"Contact candidate: {TelLinkContactSink().contact(candidate.phone)}")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except FRIBaseError as e:
        logger.error(f"Interview aborted: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nInterview cancelled.")
