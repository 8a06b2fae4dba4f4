"""Infrastructure components for the QnA client.

Thin clients for the three hosted services: question answering and
sentiment over REST, speech through the Azure speech SDK.
"""

from .language import (
    QuestionAnsweringClient, KnowledgeBaseProject, TextAnalyticsClient,
    KnowledgeBaseAnswer, DocumentSentiment
)
from .speech import (
    create_speech_config, recognize_once, speak_text, is_ssml,
    RecognitionResult, SynthesisResult
)

__all__ = [
    # Language services
    "QuestionAnsweringClient", "KnowledgeBaseProject", "TextAnalyticsClient",
    "KnowledgeBaseAnswer", "DocumentSentiment",

    # Speech services
    "create_speech_config", "recognize_once", "speak_text", "is_ssml",
    "RecognitionResult", "SynthesisResult",
]
