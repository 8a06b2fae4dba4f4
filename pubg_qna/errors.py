"""
Exception types for the QnA client.
"""
from typing import Optional


class QnAError(Exception):
    """Base class for all QnA client errors."""


class ConfigurationError(QnAError, ValueError):
    """Settings are missing or malformed. Fatal at startup."""


class ServiceRequestError(QnAError, RuntimeError):
    """A call to the question answering or text analytics service failed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
