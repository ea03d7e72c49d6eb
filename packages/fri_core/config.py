from typing import Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from packages.fri_core.errors import ConfigurationError


class FRIConfig(BaseSettings):
    """
    Application-wide settings.
    Values are read from the environment and the .env file.
    """
    PROJECT_NAME: str = "FirstRound Interview"
    VERSION: str = "0.1.0"

    # Question set shape (reference configuration: 4 technical + 1 behavioral)
    TECHNICAL_QUESTION_COUNT: int = 4
    BEHAVIORAL_QUESTION_COUNT: int = 1

    # Recommendation thresholds on the average answer score
    HIRE_THRESHOLD: float = 7.5
    MAYBE_THRESHOLD: float = 5.5

    # Fixed seed for question shuffling and evaluator noise (None = system entropy)
    RANDOM_SEED: Optional[int] = None

    # Optional JSON question bank replacing the built-in one
    QUESTION_BANK_PATH: Optional[str] = None

    REPORT_EXPORT_DIR: str = "data/reports"

    # Speech capture attempts per question before giving up
    MAX_CAPTURE_ATTEMPTS: int = 3

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @model_validator(mode="after")
    def _check_consistency(self) -> "FRIConfig":
        if self.TECHNICAL_QUESTION_COUNT < 1 or self.BEHAVIORAL_QUESTION_COUNT < 1:
            raise ValueError("each question category needs at least one question")
        if self.MAYBE_THRESHOLD > self.HIRE_THRESHOLD:
            raise ValueError("MAYBE_THRESHOLD must not exceed HIRE_THRESHOLD")
        if self.MAX_CAPTURE_ATTEMPTS < 1:
            raise ValueError("MAX_CAPTURE_ATTEMPTS must be positive")
        return self

    @property
    def question_count(self) -> int:
        return self.TECHNICAL_QUESTION_COUNT + self.BEHAVIORAL_QUESTION_COUNT

    @classmethod
    def load(cls, **overrides) -> "FRIConfig":
        """
        Load settings and wrap any failure in ConfigurationError.
        """
        try:
            return cls(**overrides)
        except Exception as e:
            raise ConfigurationError(f"Failed to load configuration: {str(e)}") from e
