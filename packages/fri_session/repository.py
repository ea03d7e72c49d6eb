from abc import ABC, abstractmethod
from typing import List, Optional

from .dto import SessionContext


class SessionStateRepository(ABC):
    """
    Interface for live session state storage.
    One SessionContext per session id; contexts are never shared between sessions.
    """
    @abstractmethod
    def save_state(self, session_id: str, context: SessionContext) -> None:
        pass

    @abstractmethod
    def get_state(self, session_id: str) -> Optional[SessionContext]:
        pass

    @abstractmethod
    def list_states(self) -> List[SessionContext]:
        pass
