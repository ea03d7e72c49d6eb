from typing import Dict, List, Tuple


class NarrativeTemplates:
    """
    Sentences used to build the strengths and improvement narratives.
    """

    # Technical terms looked up across all transcripts for the strengths narrative
    STRENGTH_TECH_KEYWORDS: Tuple[str, ...] = (
        "react", "javascript", "component", "api", "algorithm",
        "performance", "testing", "database", "framework",
    )

    # Keyword in a question text -> area named when the answers never mention it
    WEAK_TECH_AREAS: Dict[str, str] = {
        "react": "React framework concepts",
        "javascript": "JavaScript fundamentals",
        "sql": "SQL and database design",
        "api": "API design",
        "testing": "testing strategy",
        "deployment": "deployment practices",
    }

    STRENGTH_FALLBACK = "Shows potential and basic understanding of role requirements"
    IMPROVEMENT_FALLBACK = "Continue developing skills and gaining practical experience"

    USES_EXAMPLES = "Effectively uses real-world examples to explain concepts"
    TEAM_COLLABORATION = "Strong team collaboration and communication skills"
    PROBLEM_SOLVING = "Demonstrates problem-solving mindset and resilience"
    STRUCTURED_ANSWERS = "Structures answers around concrete situations, actions and results"
    LEADERSHIP = "Shows leadership potential and initiative"
    DETAILED_RESPONSES = "Provides comprehensive and detailed responses"
    CONSISTENT = "Consistent performance across different question types"

    GENERIC_TECH_WEAKNESS = "Technical knowledge requires strengthening with more hands-on practice"
    STAR_MISSING = "Should structure answers using STAR method (Situation, Task, Action, Result)"
    NEEDS_DETAIL = "Responses need more detail and specific examples"
    TOO_BRIEF = "Many answers too brief - provide more comprehensive explanations"
    LOW_SCORES = "Several key areas need improvement before meeting role requirements"

    @classmethod
    def tech_understanding(cls, keywords: List[str]) -> str:
        if len(keywords) >= 3:
            return f"Demonstrated solid understanding of {', '.join(keywords[:3])}"
        return f"Shows knowledge of {', '.join(keywords)} concepts"

    @classmethod
    def missing_tech_areas(cls, areas: List[str]) -> str:
        return f"Needs deeper understanding of {' and '.join(areas)}"

    @staticmethod
    def join(sentences: List[str], fallback: str) -> str:
        return ". ".join(sentences) if sentences else fallback
