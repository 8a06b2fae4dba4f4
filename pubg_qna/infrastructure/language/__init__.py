"""Azure AI Language REST clients: question answering and sentiment."""

from .client import LanguageRestClient
from .question_answering import QuestionAnsweringClient, KnowledgeBaseProject
from .text_analytics import TextAnalyticsClient
from .schemas import KnowledgeBaseAnswer, DocumentSentiment

__all__ = [
    "LanguageRestClient", "QuestionAnsweringClient", "KnowledgeBaseProject",
    "TextAnalyticsClient", "KnowledgeBaseAnswer", "DocumentSentiment",
]
