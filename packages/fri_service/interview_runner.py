from packages.fri_core.errors import EmptyTranscriptError
from packages.fri_core.logging import get_logger
from packages.fri_providers.speech.base import ISpeechIO
from packages.fri_report.dto import Summary
from packages.fri_session.engine import InterviewSessionEngine

logger = get_logger("fri.service.runner")

RETRY_PROMPT = "I didn't catch an answer. Please try again."


class InterviewRunner:
    """
    Drives a session engine through speech I/O:
    ask each question aloud, capture the spoken answer, submit it.
    """
    def __init__(self, engine: InterviewSessionEngine, speech_io: ISpeechIO, max_attempts: int = 3):
        if max_attempts < 1:
            raise ValueError("max_attempts must be positive")
        self.engine = engine
        self.speech_io = speech_io
        self.max_attempts = max_attempts

    async def capture_answer(self) -> str:
        """
        Stream one answer into the engine. Only final chunks are kept.
        Returns the transcript accumulated so far.
        """
        async for chunk in self.speech_io.transcribe():
            if chunk.is_final:
                self.engine.append_transcript(chunk.text)
        return self.engine.context.pending_transcript

    async def ask_current(self):
        question = self.engine.current_question
        await self.speech_io.speak(question.text)

        for attempt in range(1, self.max_attempts + 1):
            await self.capture_answer()
            try:
                return self.engine.submit()
            except EmptyTranscriptError:
                logger.warning(
                    f"Empty answer for Q{question.id} in {self.engine.session_id} "
                    f"(attempt {attempt}/{self.max_attempts})"
                )
                if attempt == self.max_attempts:
                    raise
                self.engine.retake()
                await self.speech_io.speak(RETRY_PROMPT)

    async def run(self) -> Summary:
        """
        Run the remaining questions and return the summary.
        """
        while not self.engine.is_complete:
            await self.ask_current()
        return self.engine.summarize()
