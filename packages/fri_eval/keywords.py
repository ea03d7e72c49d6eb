from typing import Tuple

TECHNICAL_KEYWORDS: Tuple[str, ...] = (
    "react", "javascript", "component", "function", "api",
    "database", "algorithm", "performance", "optimization", "testing",
    "debug", "framework", "library", "async", "promise",
)

BEHAVIORAL_KEYWORDS: Tuple[str, ...] = (
    "team", "challenge", "conflict", "leadership", "communication",
    "problem", "solution", "collaboration", "responsibility", "goal",
)

STAR_INDICATORS: Tuple[str, ...] = (
    "situation", "task", "action", "result",
    "when", "what i did", "outcome", "learned",
)

EXAMPLE_MARKERS: Tuple[str, ...] = ("example", "for instance", "like when")
