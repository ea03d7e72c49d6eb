from abc import ABC, abstractmethod
from typing import AsyncIterator

from packages.fri_core.dto import TranscriptChunkDTO


class ISpeechIO(ABC):
    @abstractmethod
    def transcribe(self) -> AsyncIterator[TranscriptChunkDTO]:
        """
        Start listening and stream transcript chunks until the speaker stops.
        Implemented as an async generator; cancelling the consuming task stops capture.
        """
        pass

    @abstractmethod
    async def speak(self, text: str) -> None:
        """
        Read text aloud. Returns when playback has finished.
        """
        pass
