"""
Event-driven bookkeeping for the QnA session.
"""
import logging
from abc import ABC
from typing import Dict, Any, List, Callable
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger("events")


class EventType(str, Enum):
    """Types of session events."""
    SESSION_STARTED = "session_started"
    MODE_ENTERED = "mode_entered"
    QUESTION_PROCESSED = "question_processed"
    RECOGNITION_FAILED = "recognition_failed"
    SYNTHESIS_FAILED = "synthesis_failed"
    ERROR_OCCURRED = "error_occurred"
    SESSION_ENDED = "session_ended"


@dataclass
class QnAEvent(ABC):
    """Base class for all session events."""
    event_type: EventType
    session_id: str
    timestamp: float
    data: Dict[str, Any]


@dataclass
class SessionStartedEvent(QnAEvent):
    """Event fired when the menu loop begins."""
    def __init__(self, session_id: str, timestamp: float, project_name: str):
        super().__init__(
            event_type=EventType.SESSION_STARTED,
            session_id=session_id,
            timestamp=timestamp,
            data={"project_name": project_name}
        )


@dataclass
class ModeEnteredEvent(QnAEvent):
    """Event fired when the user enters the text or speech sub-loop."""
    def __init__(self, session_id: str, timestamp: float, mode: str):
        super().__init__(
            event_type=EventType.MODE_ENTERED,
            session_id=session_id,
            timestamp=timestamp,
            data={"mode": mode}
        )


@dataclass
class QuestionProcessedEvent(QnAEvent):
    """Event fired after answers for a question were rendered."""
    def __init__(self, session_id: str, timestamp: float, question: str,
                 mode: str, sentiment: str, answer_count: int):
        super().__init__(
            event_type=EventType.QUESTION_PROCESSED,
            session_id=session_id,
            timestamp=timestamp,
            data={
                "question": question,
                "mode": mode,
                "sentiment": sentiment,
                "answer_count": answer_count
            }
        )


@dataclass
class RecognitionFailedEvent(QnAEvent):
    """Event fired when speech recognition returns no transcript."""
    def __init__(self, session_id: str, timestamp: float, reason: str, detail: str):
        super().__init__(
            event_type=EventType.RECOGNITION_FAILED,
            session_id=session_id,
            timestamp=timestamp,
            data={"reason": reason, "detail": detail}
        )


@dataclass
class SynthesisFailedEvent(QnAEvent):
    """Event fired when an answer could not be spoken."""
    def __init__(self, session_id: str, timestamp: float, reason: str, detail: str):
        super().__init__(
            event_type=EventType.SYNTHESIS_FAILED,
            session_id=session_id,
            timestamp=timestamp,
            data={"reason": reason, "detail": detail}
        )


@dataclass
class ErrorOccurredEvent(QnAEvent):
    """Event fired when a service call fails."""
    def __init__(self, session_id: str, timestamp: float, error_type: str,
                 error_message: str, component: str):
        super().__init__(
            event_type=EventType.ERROR_OCCURRED,
            session_id=session_id,
            timestamp=timestamp,
            data={
                "error_type": error_type,
                "error_message": error_message,
                "component": component
            }
        )


@dataclass
class SessionEndedEvent(QnAEvent):
    """Event fired when the user quits."""
    def __init__(self, session_id: str, timestamp: float, questions_asked: int):
        super().__init__(
            event_type=EventType.SESSION_ENDED,
            session_id=session_id,
            timestamp=timestamp,
            data={"questions_asked": questions_asked}
        )


EventHandler = Callable[[QnAEvent], None]


class QnAEventBus:
    """Event bus for session communication."""

    def __init__(self):
        self._handlers: Dict[EventType, List[EventHandler]] = {}
        self._global_handlers: List[EventHandler] = []

    def subscribe(self, event_type: EventType, handler: EventHandler) -> None:
        """
        Subscribe to specific event type.

        Args:
            event_type: Type of event to listen for
            handler: Function to call when event occurs
        """
        self._handlers.setdefault(event_type, []).append(handler)
        logger.debug(f"Subscribed handler to {event_type}")

    def subscribe_all(self, handler: EventHandler) -> None:
        """Subscribe to all events."""
        self._global_handlers.append(handler)

    def emit(self, event: QnAEvent) -> None:
        """
        Emit an event to all subscribers.
        A failing handler is logged and never interrupts the session.
        """
        logger.debug(f"Emitting event: {event.event_type} for session {event.session_id}")

        for handler in self._handlers.get(event.event_type, []):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Error in event handler for {event.event_type}: {e}")

        for handler in self._global_handlers:
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Error in global event handler: {e}")


class EventLogger:
    """Logs all events for debugging."""

    def __init__(self, log_level: int = logging.INFO):
        self.logger = logging.getLogger("event_logger")
        self.log_level = log_level

    def handle_event(self, event: QnAEvent) -> None:
        self.logger.log(self.log_level, f"Event: {event.event_type.value} | Session: {event.session_id} | Data: {event.data}")


class SessionMetrics:
    """Collects counters from session events."""

    def __init__(self):
        self.reset()

    def handle_event(self, event: QnAEvent) -> None:
        """Update metrics based on event."""
        if event.event_type == EventType.QUESTION_PROCESSED:
            self.questions_processed += 1
            self.answers_shown += event.data.get("answer_count", 0)
        elif event.event_type == EventType.RECOGNITION_FAILED:
            self.recognition_failures += 1
        elif event.event_type == EventType.SYNTHESIS_FAILED:
            self.synthesis_failures += 1
        elif event.event_type == EventType.ERROR_OCCURRED:
            self.errors_occurred += 1

    def get_metrics(self) -> Dict[str, int]:
        """Get current metrics snapshot."""
        return {
            "questions_processed": self.questions_processed,
            "answers_shown": self.answers_shown,
            "recognition_failures": self.recognition_failures,
            "synthesis_failures": self.synthesis_failures,
            "errors_occurred": self.errors_occurred
        }

    def reset(self) -> None:
        """Reset all metrics to zero."""
        self.questions_processed = 0
        self.answers_shown = 0
        self.recognition_failures = 0
        self.synthesis_failures = 0
        self.errors_occurred = 0
