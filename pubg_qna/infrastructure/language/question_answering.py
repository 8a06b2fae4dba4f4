"""
Client for the Azure AI Language question answering service.
"""
import logging
from dataclasses import dataclass
from typing import List

from pydantic import ValidationError

from .client import LanguageRestClient
from .schemas import AnswersResult, KnowledgeBaseAnswer
from ...config import QUESTION_ANSWERING_PATH, QUESTION_ANSWERING_API_VERSION
from ...errors import ServiceRequestError

logger = logging.getLogger("language_client")


@dataclass(frozen=True)
class KnowledgeBaseProject:
    """Deployed question answering project to query."""
    project_name: str
    deployment_name: str


class QuestionAnsweringClient(LanguageRestClient):
    """Queries a deployed knowledge base for answers to a question."""

    def get_answers(self, question: str, project: KnowledgeBaseProject) -> List[KnowledgeBaseAnswer]:
        """
        Ask the knowledge base a question.

        Returns:
            Candidate answers in the order the service ranked them
        """
        params = {
            "projectName": project.project_name,
            "deploymentName": project.deployment_name,
            "api-version": QUESTION_ANSWERING_API_VERSION,
        }
        payload = self._post(QUESTION_ANSWERING_PATH, {"question": question}, params=params)

        try:
            result = AnswersResult.model_validate(payload)
        except ValidationError as e:
            raise ServiceRequestError(f"Unexpected question answering response: {e}") from e

        logger.info(f"Knowledge base returned {len(result.answers)} answer(s)")
        return result.answers
