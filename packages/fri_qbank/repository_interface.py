from abc import ABC, abstractmethod
from typing import List, Optional

from .domain import QuestionPool


class QuestionBankRepository(ABC):
    """
    Abstract interface for the role-keyed question bank.
    The bank is static and read-only.
    """

    @abstractmethod
    def find_pool(self, job_role: str) -> Optional[QuestionPool]:
        """Return the pool for a role, or None if the role is unknown."""
        pass

    @abstractmethod
    def list_roles(self) -> List[str]:
        """Roles that have a dedicated pool."""
        pass
