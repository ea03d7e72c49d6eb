import json
import os
from typing import Dict, List, Optional

from packages.fri_core.logging import get_logger
from .bank import builtin_pools
from .domain import QuestionPool
from .repository_interface import QuestionBankRepository

logger = get_logger("fri.qbank.repository")


class StaticQuestionBankRepository(QuestionBankRepository):
    """
    In-memory question bank.
    Defaults to the built-in pools; tests may pass their own.
    """

    def __init__(self, pools: Optional[Dict[str, QuestionPool]] = None):
        self._pools: Dict[str, QuestionPool] = dict(pools) if pools is not None else builtin_pools()

    def find_pool(self, job_role: str) -> Optional[QuestionPool]:
        return self._pools.get(job_role)

    def list_roles(self) -> List[str]:
        return list(self._pools.keys())


class JsonFileQuestionBankRepository(StaticQuestionBankRepository):
    """
    Question bank loaded once from a JSON file shaped as
    {"<role>": {"technical": [...], "behavioral": [...]}}.
    Pools too small for a session are skipped so the role falls back to the default pool.
    """

    def __init__(self, file_path: str, technical_count: int = 4, behavioral_count: int = 1):
        self.file_path = file_path
        super().__init__(self._load_all(technical_count, behavioral_count))

    def _load_all(self, technical_count: int, behavioral_count: int) -> Dict[str, QuestionPool]:
        if not os.path.exists(self.file_path):
            raise FileNotFoundError(f"Question bank file not found: {self.file_path}")

        with open(self.file_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        pools: Dict[str, QuestionPool] = {}
        for role, item in data.items():
            pool = QuestionPool(
                role=role,
                technical=tuple(t.strip() for t in item.get("technical", []) if t.strip()),
                behavioral=tuple(b.strip() for b in item.get("behavioral", []) if b.strip()),
            )
            if not pool.can_supply(technical_count, behavioral_count):
                logger.warning(
                    f"Skipping pool '{role}' from {self.file_path}: "
                    f"{len(pool.technical)} technical / {len(pool.behavioral)} behavioral questions"
                )
                continue
            pools[role] = pool

        logger.info(f"Loaded {len(pools)} question pools from {self.file_path}")
        return pools
