"""Speech-to-text and text-to-speech modules."""

from .config import create_speech_config
from .results import RecognitionResult, SynthesisResult
from .stt import recognize_once
from .tts import speak_text, is_ssml

__all__ = [
    "create_speech_config", "RecognitionResult", "SynthesisResult",
    "recognize_once", "speak_text", "is_ssml",
]
