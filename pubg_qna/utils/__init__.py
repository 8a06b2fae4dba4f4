"""Utility modules for imports, logging, and console handling."""

from .imports import import_quietly, load_speech_sdk, with_suppressed_audio_warnings
from .logging import setup_logging
from .console import clear_screen

__all__ = [
    "import_quietly", "load_speech_sdk", "with_suppressed_audio_warnings",
    "setup_logging", "clear_screen",
]
