from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from FRI.api.dependencies import get_admin_query_service
from FRI.api.schemas import AdminStatsResponse, InterviewRecordResponse
from packages.fri_history.dto import InterviewRecord
from packages.fri_service.admin_query import AdminQueryService

router = APIRouter(prefix="/admin", tags=["Admin"])

@router.get("/interviews", response_model=List[InterviewRecordResponse])
def get_interviews(
    search: str = "",
    limit: int = 100,
    offset: int = 0,
    service: AdminQueryService = Depends(get_admin_query_service)
):
    """
    List interviews, newest first, filtered by candidate name or job role.
    """
    return [_map_record(r) for r in service.search(search, limit=limit, offset=offset)]

@router.get("/interviews/{interview_id}", response_model=InterviewRecordResponse)
def get_interview(
    interview_id: str,
    service: AdminQueryService = Depends(get_admin_query_service)
):
    record = service.get_record(interview_id)
    if not record:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Interview not found")
    return _map_record(record)

@router.get("/stats", response_model=AdminStatsResponse)
def get_stats(service: AdminQueryService = Depends(get_admin_query_service)):
    stats = service.get_stats()
    return AdminStatsResponse(
        total_interviews=stats.total_interviews,
        completed_interviews=stats.completed_interviews,
        average_score=stats.average_score,
    )


def _map_record(record: InterviewRecord) -> InterviewRecordResponse:
    return InterviewRecordResponse(
        interview_id=record.interview_id,
        candidate_name=record.candidate_name,
        job_role=record.job_role,
        date=record.date,
        overall_score=record.overall_score,
        recommendation=record.recommendation,
        status=record.status.value,
    )
