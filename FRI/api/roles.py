from fastapi import APIRouter, Depends

from FRI.api.dependencies import get_question_repository
from FRI.api.schemas import RoleListResponse
from packages.fri_qbank.bank import JOB_ROLES
from packages.fri_qbank.repository_interface import QuestionBankRepository

router = APIRouter(prefix="/roles", tags=["Roles"])

@router.get("", response_model=RoleListResponse)
def list_roles(repository: QuestionBankRepository = Depends(get_question_repository)):
    """
    Roles offered by the intake form.
    Roles without their own question pool are interviewed from the default pool.
    """
    return RoleListResponse(roles=list(JOB_ROLES), roles_with_question_pool=repository.list_roles())
