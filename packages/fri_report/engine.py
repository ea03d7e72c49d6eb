from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional, Sequence

from packages.fri_core.errors import InvalidInputError
from packages.fri_core.logging import get_logger
from packages.fri_dto.interview import Answer, Candidate, Question, QuestionCategory
from packages.fri_eval.keywords import STAR_INDICATORS
from packages.fri_eval.rules import count_keyword_matches, count_words, find_keywords, round_score
from packages.fri_report.dto import (
    InterviewReport,
    Recommendation,
    ReportAnswer,
    ReportCandidate,
    ReportInterview,
    ReportSummary,
    Summary,
    SummaryStatistics,
)
from packages.fri_report.mapping import NarrativeTemplates

logger = get_logger("fri.report")

SHORT_ANSWER_WORDS = 30
LOW_SCORE = 5.0
STRONG_AVG = 7.0
WEAK_AVG = 6.0
DETAILED_WORD_COUNT = 80
BRIEF_WORD_COUNT = 40
CONSISTENT_SPREAD = 2.0


def _mean(values: Sequence[float]) -> float:
    """
    Mean computed in decimal so one-decimal scores average exactly
    (5.0, 5.0, 5.2, 5.6, 6.7 gives 5.5, not 5.4999...).
    """
    if not values:
        return 0.0
    total = sum((Decimal(str(v)) for v in values), Decimal(0))
    return float(total / len(values))


class SummaryGenerator:
    """
    Rolls the per-answer scores of a completed session into a Summary.
    Pure: the same questions and answers always give the same Summary.
    """

    def __init__(self, hire_threshold: float = 7.5, maybe_threshold: float = 5.5):
        if maybe_threshold > hire_threshold:
            raise InvalidInputError(
                "Maybe threshold must not exceed hire threshold",
                details={"hire": hire_threshold, "maybe": maybe_threshold}
            )
        self.hire_threshold = hire_threshold
        self.maybe_threshold = maybe_threshold

    @staticmethod
    def _validate(questions: Sequence[Question], answers: Sequence[Answer]) -> None:
        if not answers or len(questions) != len(answers):
            raise InvalidInputError(
                "Summary requires one answer per question",
                details={"questions": len(questions), "answers": len(answers)}
            )
        for question, answer in zip(questions, answers):
            if question.id != answer.question_id:
                raise InvalidInputError(
                    "Answers are not aligned with questions",
                    details={"question_id": question.id, "answer_question_id": answer.question_id}
                )

    def compute_statistics(self, questions: Sequence[Question], answers: Sequence[Answer]) -> SummaryStatistics:
        self._validate(questions, answers)

        scores = [a.score for a in answers]
        technical = [a.score for q, a in zip(questions, answers) if q.category == QuestionCategory.TECHNICAL]
        behavioral = [a.score for q, a in zip(questions, answers) if q.category == QuestionCategory.BEHAVIORAL]
        word_counts = [count_words(a.transcript) for a in answers]

        return SummaryStatistics(
            average_score=_mean(scores),
            technical_avg=_mean(technical),
            behavioral_avg=_mean(behavioral),
            avg_word_count=_mean(word_counts),
            score_variance=max(scores) - min(scores),
            short_answer_count=sum(1 for wc in word_counts if wc < SHORT_ANSWER_WORDS),
            low_score_count=sum(1 for s in scores if s < LOW_SCORE),
        )

    def recommend(self, average_score: float) -> Recommendation:
        if average_score >= self.hire_threshold:
            return Recommendation.HIRE
        if average_score >= self.maybe_threshold:
            return Recommendation.MAYBE
        return Recommendation.NO

    def _strengths(self, stats: SummaryStatistics, transcripts: str) -> List[str]:
        strengths: List[str] = []

        if stats.technical_avg >= STRONG_AVG:
            mentioned = find_keywords(transcripts, NarrativeTemplates.STRENGTH_TECH_KEYWORDS)
            if mentioned:
                strengths.append(NarrativeTemplates.tech_understanding(mentioned))
            if "example" in transcripts or "experience" in transcripts:
                strengths.append(NarrativeTemplates.USES_EXAMPLES)

        if stats.behavioral_avg >= STRONG_AVG:
            if "team" in transcripts and "collaboration" in transcripts:
                strengths.append(NarrativeTemplates.TEAM_COLLABORATION)
            if "challenge" in transcripts or "problem" in transcripts:
                strengths.append(NarrativeTemplates.PROBLEM_SOLVING)
            if count_keyword_matches(transcripts, STAR_INDICATORS) >= 2:
                strengths.append(NarrativeTemplates.STRUCTURED_ANSWERS)
            if "leadership" in transcripts or "led" in transcripts:
                strengths.append(NarrativeTemplates.LEADERSHIP)

        if stats.avg_word_count > DETAILED_WORD_COUNT:
            strengths.append(NarrativeTemplates.DETAILED_RESPONSES)

        if stats.score_variance <= CONSISTENT_SPREAD and stats.average_score >= STRONG_AVG:
            strengths.append(NarrativeTemplates.CONSISTENT)

        return strengths

    def _improvements(
        self,
        stats: SummaryStatistics,
        transcripts: str,
        questions: Sequence[Question],
    ) -> List[str]:
        improvements: List[str] = []
        has_technical = any(q.category == QuestionCategory.TECHNICAL for q in questions)
        has_behavioral = any(q.category == QuestionCategory.BEHAVIORAL for q in questions)

        if has_technical and stats.technical_avg < WEAK_AVG:
            question_texts = " ".join(q.text for q in questions).lower()
            weak_areas = [
                area for keyword, area in NarrativeTemplates.WEAK_TECH_AREAS.items()
                if keyword in question_texts and keyword not in transcripts
            ]
            if weak_areas:
                improvements.append(NarrativeTemplates.missing_tech_areas(weak_areas))
            else:
                improvements.append(NarrativeTemplates.GENERIC_TECH_WEAKNESS)

        if has_behavioral and stats.behavioral_avg < WEAK_AVG:
            if "situation" not in transcripts and "result" not in transcripts:
                improvements.append(NarrativeTemplates.STAR_MISSING)
            if stats.avg_word_count < BRIEF_WORD_COUNT:
                improvements.append(NarrativeTemplates.NEEDS_DETAIL)

        if stats.short_answer_count >= 2:
            improvements.append(NarrativeTemplates.TOO_BRIEF)

        if stats.low_score_count >= 2:
            improvements.append(NarrativeTemplates.LOW_SCORES)

        return improvements

    def summarize(self, questions: Sequence[Question], answers: Sequence[Answer]) -> Summary:
        stats = self.compute_statistics(questions, answers)
        transcripts = " ".join(a.transcript for a in answers).lower()

        summary = Summary(
            strengths=NarrativeTemplates.join(
                self._strengths(stats, transcripts), NarrativeTemplates.STRENGTH_FALLBACK
            ),
            improvement_areas=NarrativeTemplates.join(
                self._improvements(stats, transcripts, questions), NarrativeTemplates.IMPROVEMENT_FALLBACK
            ),
            final_rating=round_score(stats.average_score),
            recommendation=self.recommend(stats.average_score),
        )
        logger.info(
            f"Summary: average={stats.average_score:.3f}, technical={stats.technical_avg:.2f}, "
            f"behavioral={stats.behavioral_avg:.2f}, recommendation={summary.recommendation.value}"
        )
        return summary


class ReportGenerator:
    """
    Converts a completed session into the export document.
    """

    @staticmethod
    def generate(
        candidate: Candidate,
        questions: Sequence[Question],
        answers: Sequence[Answer],
        summary: Summary,
        generated_at: Optional[datetime] = None,
    ) -> InterviewReport:
        if len(questions) != len(answers):
            raise InvalidInputError(
                "Report requires one answer per question",
                details={"questions": len(questions), "answers": len(answers)}
            )

        generated_at = generated_at or datetime.now(timezone.utc)
        total = round_score(sum(a.score for a in answers))
        max_score = len(answers) * 10

        return InterviewReport(
            candidate=ReportCandidate(
                name=candidate.name,
                phone=candidate.phone,
                role=candidate.job_role,
            ),
            interview=ReportInterview(
                date=generated_at.isoformat(),
                question_count=len(questions),
                total_score=f"{total:g}/{max_score}",
                average_score=summary.final_rating,
                recommendation=summary.recommendation,
            ),
            summary=ReportSummary(
                strengths=summary.strengths,
                improvement_areas=summary.improvement_areas,
            ),
            answers=[
                ReportAnswer(
                    question=q.text,
                    type=q.category.value,
                    score=a.score,
                    feedback=a.feedback,
                    transcript=a.transcript,
                )
                for q, a in zip(questions, answers)
            ],
        )
