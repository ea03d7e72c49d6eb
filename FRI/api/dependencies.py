import random
from functools import lru_cache
from typing import Optional

from packages.fri_core.config import FRIConfig
from packages.fri_eval.engine import AnswerEvaluator
from packages.fri_history.repository import HistoryRepository, MemoryHistoryRepository
from packages.fri_qbank.repository import JsonFileQuestionBankRepository, StaticQuestionBankRepository
from packages.fri_qbank.repository_interface import QuestionBankRepository
from packages.fri_qbank.service import QuestionSelector
from packages.fri_report.engine import SummaryGenerator
from packages.fri_report.sinks import JsonFileReportExporter, ReportExporter
from packages.fri_service.admin_query import AdminQueryService
from packages.fri_service.concurrency import ConcurrencyManager
from packages.fri_service.session_service import SessionService
from packages.fri_session.infrastructure.memory_repo import MemorySessionRepository
from packages.fri_session.repository import SessionStateRepository

# --- Configuration ---

@lru_cache
def get_config() -> FRIConfig:
    return FRIConfig.load()

@lru_cache
def get_rng() -> random.Random:
    """
    Shared random source for question shuffling and evaluator noise.
    Seeded when RANDOM_SEED is set.
    """
    seed: Optional[int] = get_config().RANDOM_SEED
    return random.Random(seed) if seed is not None else random.Random()

# --- Repositories (Persistence) ---

@lru_cache
def get_question_repository() -> QuestionBankRepository:
    """
    Singleton Question Bank Repository.
    JSON file when QUESTION_BANK_PATH is set, built-in bank otherwise.
    """
    config = get_config()
    if config.QUESTION_BANK_PATH:
        return JsonFileQuestionBankRepository(
            file_path=config.QUESTION_BANK_PATH,
            technical_count=config.TECHNICAL_QUESTION_COUNT,
            behavioral_count=config.BEHAVIORAL_QUESTION_COUNT,
        )
    return StaticQuestionBankRepository()

@lru_cache
def get_session_state_repository() -> SessionStateRepository:
    """
    Singleton Session State Repository (Memory).
    Must be shared across requests to maintain state.
    """
    return MemorySessionRepository()

@lru_cache
def get_history_repository() -> HistoryRepository:
    """
    Singleton interview listing for the admin view.
    """
    return MemoryHistoryRepository()

@lru_cache
def get_concurrency_manager() -> ConcurrencyManager:
    return ConcurrencyManager()

@lru_cache
def get_report_exporter() -> ReportExporter:
    return JsonFileReportExporter(base_dir=get_config().REPORT_EXPORT_DIR)

# --- Domain Services (Application Logic) ---

@lru_cache
def get_question_selector() -> QuestionSelector:
    config = get_config()
    return QuestionSelector(
        repository=get_question_repository(),
        rng=get_rng(),
        technical_count=config.TECHNICAL_QUESTION_COUNT,
        behavioral_count=config.BEHAVIORAL_QUESTION_COUNT,
    )

@lru_cache
def get_answer_evaluator() -> AnswerEvaluator:
    return AnswerEvaluator(rng=get_rng())

@lru_cache
def get_summary_generator() -> SummaryGenerator:
    config = get_config()
    return SummaryGenerator(
        hire_threshold=config.HIRE_THRESHOLD,
        maybe_threshold=config.MAYBE_THRESHOLD,
    )

def get_session_service() -> SessionService:
    """
    Transient Session Service.
    Injected with Singleton Repositories and Services.
    """
    return SessionService(
        state_repo=get_session_state_repository(),
        history_repo=get_history_repository(),
        selector=get_question_selector(),
        evaluator=get_answer_evaluator(),
        summary_generator=get_summary_generator(),
        concurrency_manager=get_concurrency_manager(),
    )

def get_admin_query_service() -> AdminQueryService:
    """
    Transient Admin Query Service (Read-Only).
    """
    return AdminQueryService(repository=get_history_repository())
