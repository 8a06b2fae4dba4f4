"""
Wire schemas for the Azure AI Language REST responses.
"""
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class KnowledgeBaseAnswer(BaseModel):
    """One candidate answer from the question answering service."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    answer: str = ""
    confidence: float = Field(default=0.0, alias="confidenceScore")
    source: Optional[str] = None
    id: Optional[int] = None
    questions: List[str] = Field(default_factory=list)


class AnswersResult(BaseModel):
    """Response body of ``:query-knowledgebases``."""
    model_config = ConfigDict(extra="ignore")

    answers: List[KnowledgeBaseAnswer] = Field(default_factory=list)


class SentimentConfidenceScores(BaseModel):
    positive: float = 0.0
    neutral: float = 0.0
    negative: float = 0.0


class DocumentSentiment(BaseModel):
    """Sentiment of a single analysed document."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    sentiment: str
    confidence_scores: SentimentConfidenceScores = Field(
        default_factory=SentimentConfidenceScores, alias="confidenceScores"
    )

    @property
    def label(self) -> str:
        """Capitalised label as shown to the user, e.g. ``Neutral``."""
        return self.sentiment.capitalize()


class DocumentError(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    error: Dict[str, object] = Field(default_factory=dict)


class SentimentResponse(BaseModel):
    """Response body of the sentiment endpoint."""
    model_config = ConfigDict(extra="ignore")

    documents: List[DocumentSentiment] = Field(default_factory=list)
    errors: List[DocumentError] = Field(default_factory=list)
