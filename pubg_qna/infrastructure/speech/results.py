"""
Outcome records returned by the speech operations.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class RecognitionResult:
    """Outcome of one speech-to-text attempt."""
    text: str
    reason: str
    detail: str = ""

    @property
    def succeeded(self) -> bool:
        return self.reason == "RecognizedSpeech"


@dataclass(frozen=True)
class SynthesisResult:
    """Outcome of one text-to-speech attempt."""
    completed: bool
    reason: str
    detail: str = ""
