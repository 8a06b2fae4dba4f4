"""
Data models for the QnA session.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ..infrastructure.speech import SynthesisResult


class InteractionMode(str, Enum):
    """How the current question was asked. Only speech mode vocalizes answers."""
    TEXT = "text"
    SPEECH = "speech"


@dataclass
class QuestionResult:
    """Everything shown to the user for one processed question."""
    question: str
    sentiment: str
    mode: InteractionMode
    answers: List[str] = field(default_factory=list)
    synthesis: List[SynthesisResult] = field(default_factory=list)
