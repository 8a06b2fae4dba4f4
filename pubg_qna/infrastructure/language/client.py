"""
Base REST client for Azure AI Language resources.
"""
import logging
from typing import Any, Dict, Optional

import requests

from ...config import HTTP_TIMEOUT
from ...errors import ServiceRequestError

logger = logging.getLogger("language_client")


class LanguageRestClient:
    """Key-authenticated JSON client for one Azure Cognitive Services endpoint."""

    def __init__(self, endpoint: str, key: str, timeout: int = HTTP_TIMEOUT):
        self.endpoint = endpoint.rstrip("/")
        self.key = key
        self.timeout = timeout

    def _post(self,
              path: str,
              body: Dict[str, Any],
              params: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        """POST a JSON body and return the decoded JSON response."""
        url = f"{self.endpoint}{path}"
        headers = {
            "Ocp-Apim-Subscription-Key": self.key,
            "Content-Type": "application/json",
        }

        logger.debug(f"POST {url} params={params}")
        try:
            resp = requests.post(url, headers=headers, params=params, json=body, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("Request to %s failed: %s", url, e)
            raise ServiceRequestError(f"Request to {url} failed: {e}") from e

        if resp.status_code >= 400:
            raise ServiceRequestError(
                f"{self._describe_error(resp)} (HTTP {resp.status_code})",
                status_code=resp.status_code,
            )

        try:
            return resp.json()
        except ValueError as e:
            raise ServiceRequestError(
                f"Service returned a non-JSON response: {resp.text[:200]}",
                status_code=resp.status_code,
            ) from e

    @staticmethod
    def _describe_error(resp: requests.Response) -> str:
        """
        Pull the message out of an Azure error envelope.
        Falls back to the raw body when the envelope is absent.
        """
        try:
            payload = resp.json()
        except ValueError:
            return resp.text or "Service error"

        error = payload.get("error") if isinstance(payload, dict) else None
        if isinstance(error, dict):
            code = error.get("code", "Error")
            message = error.get("message", "")
            return f"{code}: {message}".strip()
        return resp.text or "Service error"
