from packages.fri_dto.interview import Answer
from packages.fri_dto.session import AnswerDTO, QuestionDTO, SessionResponseDTO
from packages.fri_session.dto import SessionContext


class SessionMapper:
    @staticmethod
    def answer_to_dto(answer: Answer) -> AnswerDTO:
        return AnswerDTO(
            question_id=answer.question_id,
            transcript=answer.transcript,
            score=answer.score,
            feedback=answer.feedback,
        )

    @staticmethod
    def to_dto(context: SessionContext) -> SessionResponseDTO:
        current = context.current_question
        current_dto = None
        if current is not None:
            current_dto = QuestionDTO(
                id=current.id,
                content=current.text,
                type=current.category.value,
                sequence_number=context.cursor + 1,
            )

        answered = len(context.answers)
        return SessionResponseDTO(
            session_id=context.session_id,
            status=context.status.value,
            candidate_name=context.candidate.name,
            job_role=context.candidate.job_role,
            created_at=context.created_at,
            completed_at=context.completed_at,
            current_question=current_dto,
            answered_questions=answered,
            total_questions=context.question_count,
            progress_percentage=round(answered / context.question_count * 100.0, 1),
            has_pending_transcript=bool(context.pending_transcript),
            answers=[SessionMapper.answer_to_dto(a) for a in context.answers],
        )
