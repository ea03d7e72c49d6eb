from .base import ISpeechIO
from .mock import ScriptedSpeechIO

__all__ = ["ISpeechIO", "ScriptedSpeechIO"]
