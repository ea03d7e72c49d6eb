from typing import List, MutableSequence

from packages.fri_dto.interview import Answer, Candidate, Question, QuestionCategory


class FixedRandom:
    """
    Random source pinned to one value; shuffle keeps the original order.
    With 0.5 every draw lands on the middle of its range and the jitter is zero.
    """
    def __init__(self, value: float = 0.5):
        self.value = value

    def random(self) -> float:
        return self.value

    def shuffle(self, items: MutableSequence) -> None:
        pass


def filler(count: int, word: str = "word") -> str:
    return " ".join([word] * count)


def make_candidate(job_role: str = "Frontend Developer", resume_text: str = "Five years of product work") -> Candidate:
    return Candidate(name="Jane Doe", phone="+1 (555) 123-4567", job_role=job_role, resume_text=resume_text)


def make_questions(*categories: QuestionCategory) -> List[Question]:
    return [
        Question(id=i, text=f"Question number {i}", category=category)
        for i, category in enumerate(categories, start=1)
    ]


def make_answers(scores: List[float], transcript: str = "an answer") -> List[Answer]:
    return [
        Answer(question_id=i, transcript=transcript, score=score, feedback="feedback")
        for i, score in enumerate(scores, start=1)
    ]
