from typing import Union

from fastapi import APIRouter, Depends, HTTPException, status

from FRI.api.dependencies import get_report_exporter, get_session_service
from FRI.api.schemas import (
    AnswerResultResponse,
    AnswerSchema,
    AnswerSubmitRequest,
    CandidateCreateRequest,
    QuestionSchema,
    ReportExportResponse,
    SessionResponse,
    SummaryResponse,
    TranscriptFragmentRequest,
)
from packages.fri_core.errors import (
    EmptyTranscriptError,
    FRIBaseError,
    InvalidInputError,
    InvalidStateError,
    SessionNotFoundError,
)
from packages.fri_core.logging import get_logger
from packages.fri_dto.interview import Candidate
from packages.fri_dto.session import AnswerDTO, SessionResponseDTO
from packages.fri_report.sinks import ReportExporter
from packages.fri_service.session_service import SessionService

router = APIRouter(prefix="/sessions", tags=["Session"])
logger = get_logger("fri.api.session")

@router.post("", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
def create_session(
    request: CandidateCreateRequest,
    service: SessionService = Depends(get_session_service)
):
    """
    Start a new interview for the submitted candidate.
    """
    candidate = Candidate(
        name=request.name,
        phone=request.phone,
        job_role=request.job_role,
        resume_text=request.resume_text,
    )
    try:
        dto = service.create_session(candidate)
    except FRIBaseError as e:
        raise _to_http_error(e)
    return _map_dto_to_response(dto)

@router.get("/{session_id}", response_model=SessionResponse)
def get_session(
    session_id: str,
    service: SessionService = Depends(get_session_service)
):
    """
    Get current session status.
    """
    dto = service.get_session(session_id)
    if not dto:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")
    return _map_dto_to_response(dto)

@router.post("/{session_id}/transcript", response_model=SessionResponse)
def record_transcript(
    session_id: str,
    fragment: TranscriptFragmentRequest,
    service: SessionService = Depends(get_session_service)
):
    """
    Append a final speech fragment to the answer being recorded.
    """
    try:
        dto = service.record_transcript(session_id, fragment.text)
    except (FRIBaseError, BlockingIOError) as e:
        raise _to_http_error(e)
    return _map_dto_to_response(dto)

@router.post("/{session_id}/answers", response_model=AnswerResultResponse)
def submit_answer(
    session_id: str,
    answer: AnswerSubmitRequest,
    service: SessionService = Depends(get_session_service)
):
    """
    Submit an answer for the current question.
    Delegates to Service Layer for Concurrency Control and Logic.
    """
    try:
        result = service.submit_answer(session_id, answer.transcript)
    except (FRIBaseError, BlockingIOError) as e:
        raise _to_http_error(e)
    return AnswerResultResponse(
        answer=_map_answer(result.answer),
        session=_map_dto_to_response(result.session),
    )

@router.post("/{session_id}/retake", response_model=SessionResponse)
def retake(
    session_id: str,
    service: SessionService = Depends(get_session_service)
):
    """
    Discard the recorded transcript of the current question.
    """
    try:
        dto = service.retake(session_id)
    except (FRIBaseError, BlockingIOError) as e:
        raise _to_http_error(e)
    return _map_dto_to_response(dto)

@router.get("/{session_id}/summary", response_model=SummaryResponse)
def get_summary(
    session_id: str,
    service: SessionService = Depends(get_session_service)
):
    try:
        summary = service.get_summary(session_id)
    except FRIBaseError as e:
        raise _to_http_error(e)
    return SummaryResponse(
        strengths=summary.strengths,
        improvement_areas=summary.improvement_areas,
        final_rating=summary.final_rating,
        recommendation=summary.recommendation.value,
    )

@router.get("/{session_id}/report")
def get_report(
    session_id: str,
    service: SessionService = Depends(get_session_service)
):
    """
    Export document of a completed interview (camelCase keys).
    """
    try:
        report = service.get_report(session_id)
    except FRIBaseError as e:
        raise _to_http_error(e)
    return report.to_document()

@router.post("/{session_id}/report/export", response_model=ReportExportResponse)
def export_report(
    session_id: str,
    service: SessionService = Depends(get_session_service),
    exporter: ReportExporter = Depends(get_report_exporter)
):
    """
    Write the export document through the configured report exporter.
    """
    try:
        report = service.get_report(session_id)
    except FRIBaseError as e:
        raise _to_http_error(e)
    return ReportExportResponse(path=exporter.export(report))


def _to_http_error(error: Union[FRIBaseError, BlockingIOError]) -> HTTPException:
    if isinstance(error, BlockingIOError):
        # FAIL-FAST: Concurrency Lock Error
        return HTTPException(status_code=status.HTTP_423_LOCKED, detail=str(error))

    if isinstance(error, SessionNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, (EmptyTranscriptError, InvalidInputError)):
        status_code = status.HTTP_400_BAD_REQUEST
    elif isinstance(error, InvalidStateError):
        status_code = status.HTTP_409_CONFLICT
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    logger.warning(f"{error.code} -> HTTP {status_code}: {error.message}")
    return HTTPException(
        status_code=status_code,
        detail={"code": error.code, "message": error.message, "details": error.details},
    )


def _map_answer(dto: AnswerDTO) -> AnswerSchema:
    return AnswerSchema(
        question_id=dto.question_id,
        transcript=dto.transcript,
        score=dto.score,
        feedback=dto.feedback,
    )


def _map_dto_to_response(dto: SessionResponseDTO) -> SessionResponse:
    # Helper to map strictly to API Contract
    current_q = None
    current_idx = 0

    if dto.current_question:
        current_idx = dto.current_question.sequence_number
        current_q = QuestionSchema(
            id=dto.current_question.id,
            sequence=dto.current_question.sequence_number,
            content=dto.current_question.content,
            q_type=dto.current_question.type,
        )

    return SessionResponse(
        session_id=dto.session_id,
        status=dto.status,
        candidate_name=dto.candidate_name,
        job_role=dto.job_role,
        current_question_index=current_idx,
        total_questions=dto.total_questions,
        progress_percentage=dto.progress_percentage,
        has_pending_transcript=dto.has_pending_transcript,
        current_question=current_q,
        answers=[_map_answer(a) for a in dto.answers],
        created_at=dto.created_at,
        completed_at=dto.completed_at,
    )
