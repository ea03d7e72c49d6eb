import asyncio
from typing import AsyncIterator, List, Optional, Sequence

from packages.fri_core.dto import TranscriptChunkDTO
from packages.fri_providers.speech.base import ISpeechIO


class ScriptedSpeechIO(ISpeechIO):
    """
    Deterministic speech I/O for tests and demos.
    Each transcribe() call replays the next scripted answer as one interim
    chunk per word followed by a final chunk with the whole text.
    """
    def __init__(self, answers: Sequence[str], latency_ms: int = 0):
        self._answers: List[str] = list(answers)
        self._next = 0
        self.latency_ms = latency_ms
        self.spoken: List[str] = []

    async def _pause(self):
        if self.latency_ms > 0:
            await asyncio.sleep(self.latency_ms / 1000.0)

    async def transcribe(self) -> AsyncIterator[TranscriptChunkDTO]:
        if self._next >= len(self._answers):
            return
        answer = self._answers[self._next]
        self._next += 1

        partial: Optional[str] = None
        for word in answer.split():
            await self._pause()
            partial = f"{partial} {word}" if partial else word
            yield TranscriptChunkDTO(text=partial, is_final=False)

        await self._pause()
        yield TranscriptChunkDTO(text=answer, is_final=True)

    async def speak(self, text: str) -> None:
        await self._pause()
        self.spoken.append(text)
