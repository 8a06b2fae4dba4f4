"""
Per-question pipeline: answers, sentiment, and rendering.
"""
import time
import logging
from typing import Callable, Optional

from .models import InteractionMode, QuestionResult
from .services import AnsweringService, SentimentService, SpeechService
from .events import QnAEventBus, QuestionProcessedEvent, SynthesisFailedEvent
from ..infrastructure.speech import is_ssml
from ..utils import clear_screen as default_clear_screen

logger = logging.getLogger("qna_processor")


class QuestionProcessor:
    """Answers one question and renders the result to the console (and speaker)."""

    def __init__(self,
                 answering_service: AnsweringService,
                 sentiment_service: SentimentService,
                 speech_service: Optional[SpeechService],
                 event_bus: Optional[QnAEventBus] = None,
                 session_id: str = "unknown",
                 clear_screen: Callable[[], None] = default_clear_screen):
        self.answering_service = answering_service
        self.sentiment_service = sentiment_service
        self.speech_service = speech_service
        self.event_bus = event_bus or QnAEventBus()
        self.session_id = session_id
        self.clear_screen = clear_screen

    def process(self, question: str, mode: InteractionMode) -> QuestionResult:
        """
        Run the pipeline for one question.

        Answers are requested before sentiment, and every answer is shown in
        the order the service returned it.

        Args:
            question: Non-empty question text
            mode: TEXT or SPEECH; only SPEECH vocalizes plain-text answers

        Returns:
            QuestionResult describing what was rendered

        Raises:
            ServiceRequestError: If the answering or sentiment call fails
        """
        answers = self.answering_service.get_answers(question)
        sentiment = self.sentiment_service.get_sentiment(question)

        self.clear_screen()
        print(f"\nSentiment: {sentiment}")

        result = QuestionResult(question=question, sentiment=sentiment, mode=mode)
        for answer in answers:
            text = answer.answer
            print(f"Q:{question}")

            if mode == InteractionMode.SPEECH and not is_ssml(text):
                self._speak_answer(text, result)
            print(f"A:{text}")
            result.answers.append(text)

        if not answers:
            print("No answers were found for your question.")

        logger.info(f"Processed question in {mode.value} mode: {len(answers)} answer(s), sentiment {sentiment}")
        self.event_bus.emit(QuestionProcessedEvent(
            self.session_id, time.time(), question, mode.value, sentiment, len(answers)
        ))
        return result

    def _speak_answer(self, text: str, result: QuestionResult) -> None:
        if self.speech_service is None:
            raise RuntimeError("Speech service not available")

        synthesis = self.speech_service.speak(text)
        result.synthesis.append(synthesis)

        if synthesis.completed:
            print("Speaking Answer...")
            return

        print(f"Speech synthesis error: {synthesis.reason}")
        self.event_bus.emit(SynthesisFailedEvent(
            self.session_id, time.time(), synthesis.reason, synthesis.detail
        ))
