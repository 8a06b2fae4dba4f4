"""
Client for the Azure Text Analytics sentiment endpoint.
"""
import logging

from pydantic import ValidationError

from .client import LanguageRestClient
from .schemas import DocumentSentiment, SentimentResponse
from ...config import SENTIMENT_PATH, TEXT_ANALYTICS_LANGUAGE, HTTP_TIMEOUT
from ...errors import ServiceRequestError

logger = logging.getLogger("language_client")

DOCUMENT_ID = "1"


class TextAnalyticsClient(LanguageRestClient):
    """Sentiment analysis for single documents."""

    def __init__(self, endpoint: str, key: str,
                 language: str = TEXT_ANALYTICS_LANGUAGE,
                 timeout: int = HTTP_TIMEOUT):
        super().__init__(endpoint, key, timeout)
        self.language = language

    def analyze_sentiment(self, text: str) -> DocumentSentiment:
        """Analyse one text and return its document-level sentiment."""
        body = {
            "documents": [
                {"id": DOCUMENT_ID, "language": self.language, "text": text}
            ]
        }
        payload = self._post(SENTIMENT_PATH, body)

        try:
            result = SentimentResponse.model_validate(payload)
        except ValidationError as e:
            raise ServiceRequestError(f"Unexpected sentiment response: {e}") from e

        for doc_error in result.errors:
            if doc_error.id == DOCUMENT_ID:
                message = doc_error.error.get("message", doc_error.error)
                raise ServiceRequestError(f"Sentiment analysis failed: {message}")

        for document in result.documents:
            if document.id == DOCUMENT_ID:
                logger.info(f"Sentiment: {document.sentiment}")
                return document

        raise ServiceRequestError("Sentiment response did not include the analysed document")
