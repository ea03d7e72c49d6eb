from typing import Dict, List, Optional

from packages.fri_session.dto import SessionContext
from packages.fri_session.repository import SessionStateRepository


class MemorySessionRepository(SessionStateRepository):
    """
    In-memory implementation of SessionStateRepository.
    State lives for the lifetime of the process.
    """
    def __init__(self):
        self._store: Dict[str, SessionContext] = {}

    def save_state(self, session_id: str, context: SessionContext) -> None:
        self._store[session_id] = context

    def get_state(self, session_id: str) -> Optional[SessionContext]:
        return self._store.get(session_id)

    def list_states(self) -> List[SessionContext]:
        return list(self._store.values())
