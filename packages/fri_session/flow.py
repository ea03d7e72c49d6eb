from typing import Dict, Tuple

from packages.fri_core.errors import InvalidStateError
from packages.fri_core.logging import get_logger
from .state import InterviewStage

logger = get_logger("fri.session.flow")

# transition name -> (source stage, target stage)
TRANSITIONS: Dict[str, Tuple[InterviewStage, InterviewStage]] = {
    "start_interview": (InterviewStage.FORM, InterviewStage.INTERVIEW),
    "complete_interview": (InterviewStage.INTERVIEW, InterviewStage.SUMMARY),
    "start_new": (InterviewStage.SUMMARY, InterviewStage.FORM),
    "open_admin": (InterviewStage.FORM, InterviewStage.ADMIN),
    "close_admin": (InterviewStage.ADMIN, InterviewStage.FORM),
}


class InterviewFlow:
    """
    Stage machine of the application: Form -> Interview -> Summary -> Form,
    with the Admin view reachable from the form.
    """
    def __init__(self, stage: InterviewStage = InterviewStage.FORM):
        self.stage = stage

    def can(self, transition: str) -> bool:
        source, _ = TRANSITIONS[transition]
        return self.stage == source

    def _fire(self, transition: str) -> InterviewStage:
        source, target = TRANSITIONS[transition]
        if self.stage != source:
            raise InvalidStateError(
                f"Cannot {transition} from stage {self.stage.value}",
                details={"stage": self.stage.value, "transition": transition}
            )
        logger.debug(f"Stage {self.stage.value} -> {target.value} ({transition})")
        self.stage = target
        return target

    def start_interview(self) -> InterviewStage:
        return self._fire("start_interview")

    def complete_interview(self) -> InterviewStage:
        return self._fire("complete_interview")

    def start_new(self) -> InterviewStage:
        return self._fire("start_new")

    def open_admin(self) -> InterviewStage:
        return self._fire("open_admin")

    def close_admin(self) -> InterviewStage:
        return self._fire("close_admin")
