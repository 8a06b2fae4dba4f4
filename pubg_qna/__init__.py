"""
PUBG QnA: ask a game knowledge base questions by text or by voice.

Answers come from a hosted question answering project, each question is
labelled with its sentiment, and in speech mode answers are read aloud.
"""

__version__ = "1.0.0"

# Main entry points
from .qna.session import QnASession
from .qna.models import InteractionMode, QuestionResult
from .config import Config, get_config

__all__ = ["QnASession", "InteractionMode", "QuestionResult", "Config", "get_config"]
