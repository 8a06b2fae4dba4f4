"""
Service classes wrapping the three hosted capabilities.

The session only talks to these classes, so tests can swap in the mocks
from ``testing.py``.
"""
import logging
from typing import List

from ..infrastructure.language import (
    QuestionAnsweringClient, KnowledgeBaseProject, TextAnalyticsClient, KnowledgeBaseAnswer
)
from ..infrastructure.speech import recognize_once, speak_text, RecognitionResult, SynthesisResult

logger = logging.getLogger("services")


class AnsweringService:
    """Handles question answering against the deployed knowledge base."""

    def __init__(self, client: QuestionAnsweringClient, project: KnowledgeBaseProject):
        self.client = client
        self.project = project

    def get_answers(self, question: str) -> List[KnowledgeBaseAnswer]:
        """
        Fetch candidate answers for a question.

        Returns:
            Answers in service order, possibly empty

        Raises:
            ServiceRequestError: If the service call fails
        """
        logger.info(f"Querying {self.project.project_name}/{self.project.deployment_name}: {question}")
        return self.client.get_answers(question, self.project)


class SentimentService:
    """Handles sentiment labelling of questions."""

    def __init__(self, client: TextAnalyticsClient):
        self.client = client

    def get_sentiment(self, text: str) -> str:
        """Return the sentiment label: Positive, Negative, Neutral or Mixed."""
        return self.client.analyze_sentiment(text).label


class SpeechService:
    """Handles microphone recognition and spoken answers."""

    def __init__(self, speech_config):
        self.speech_config = speech_config

    def listen(self) -> RecognitionResult:
        """Recognize one utterance from the default microphone."""
        return recognize_once(self.speech_config)

    def speak(self, text: str) -> SynthesisResult:
        """Speak plain (non-SSML) text through the default speaker."""
        return speak_text(self.speech_config, text)
