"""QnA session components.

This module contains the interactive part of the client: the menu loop,
the per-question pipeline, the capability services and session events.
"""

# Session and pipeline
from .session import QnASession, is_back_command, is_go_back_phrase
from .processor import QuestionProcessor

# Data models
from .models import InteractionMode, QuestionResult

# Service classes
from .services import AnsweringService, SentimentService, SpeechService

# Event system
from .events import (
    QnAEventBus, EventLogger, SessionMetrics, EventType, QnAEvent,
    SessionStartedEvent, ModeEnteredEvent, QuestionProcessedEvent,
    RecognitionFailedEvent, SynthesisFailedEvent, ErrorOccurredEvent,
    SessionEndedEvent
)

__all__ = [
    "QnASession", "is_back_command", "is_go_back_phrase", "QuestionProcessor",
    "InteractionMode", "QuestionResult",
    "AnsweringService", "SentimentService", "SpeechService",
    "QnAEventBus", "EventLogger", "SessionMetrics", "EventType", "QnAEvent",
    "SessionStartedEvent", "ModeEnteredEvent", "QuestionProcessedEvent",
    "RecognitionFailedEvent", "SynthesisFailedEvent", "ErrorOccurredEvent",
    "SessionEndedEvent",
]
