from dataclasses import dataclass, field
from typing import Tuple

from packages.fri_dto.interview import QuestionCategory


@dataclass(frozen=True)
class QuestionPool:
    """
    Technical and behavioral question texts offered for one job role.
    Pools are shared read-only between sessions; callers shuffle copies.
    """
    role: str
    technical: Tuple[str, ...] = field(default_factory=tuple)
    behavioral: Tuple[str, ...] = field(default_factory=tuple)

    def texts(self, category: QuestionCategory) -> Tuple[str, ...]:
        if category == QuestionCategory.TECHNICAL:
            return self.technical
        return self.behavioral

    def can_supply(self, technical_count: int, behavioral_count: int) -> bool:
        """Whether the pool holds enough questions for one session."""
        return len(self.technical) >= technical_count and len(self.behavioral) >= behavioral_count
