"""
PUBG QnA Configuration System
=============================

This file contains ALL configuration for the QnA console client.
- User settings at the top (things users might want to change)
- Internal constants at the bottom (technical defaults)

Service keys and endpoints live in ``appsettings.json`` (or environment
variables), never in this file.
"""
import os
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .errors import ConfigurationError

logger = logging.getLogger("config")


# =============================================================================
# USER SETTINGS - Edit these to customize the client
# =============================================================================

# Settings file with the service endpoints and keys
SETTINGS_FILE = "appsettings.json"
SETTINGS_FILE_ENV = "QNA_SETTINGS_FILE"

# Knowledge base
PROJECT_NAME = "PubgQnA"
DEPLOYMENT_NAME = "production"

# Speech settings
TTS_VOICE = "en-US-AriaNeural"
TEXT_ANALYTICS_LANGUAGE = "en"

# Logging
LOG_FILE = "./_logs/qna.log"
LOG_LEVEL = "DEBUG"


# =============================================================================
# INTERNAL CONSTANTS - Don't change these unless you know what you're doing
# =============================================================================

# REST APIs
QUESTION_ANSWERING_PATH = "/language/:query-knowledgebases"
QUESTION_ANSWERING_API_VERSION = "2021-10-01"
SENTIMENT_PATH = "/text/analytics/v3.1/sentiment"
HTTP_TIMEOUT = 30

# Console
WELCOME_MESSAGE = "Welcome to PUBG:BATTLEGROUNDS Question and Answers."
BACK_COMMAND = "back"
ESCAPE_PHRASES = ("go back", "return to menu", "back to menu")

# settings key -> (environment override, Config field)
REQUIRED_SETTINGS = {
    "LanguageEndpoint": ("LANGUAGE_ENDPOINT", "language_endpoint"),
    "LanguageKey": ("LANGUAGE_KEY", "language_key"),
    "TextAnalyticsEndpoint": ("TEXT_ANALYTICS_ENDPOINT", "text_analytics_endpoint"),
    "TextAnalyticsKey": ("TEXT_ANALYTICS_KEY", "text_analytics_key"),
    "SpeechKey": ("SPEECH_KEY", "speech_key"),
    "SpeechLocation": ("SPEECH_LOCATION", "speech_location"),
}

OPTIONAL_SETTINGS = {
    "TextAnalyticsLanguage": ("TEXT_ANALYTICS_LANGUAGE", "text_analytics_language"),
    "LogFile": ("QNA_LOG_FILE", "log_file"),
    "LogLevel": ("QNA_LOG_LEVEL", "log_level"),
}

ENDPOINT_FIELDS = ("language_endpoint", "text_analytics_endpoint")


# =============================================================================
# MAIN CONFIG OBJECT
# =============================================================================

@dataclass(frozen=True)
class Config:
    """Main configuration object, immutable for the life of the process."""
    language_endpoint: str
    language_key: str
    text_analytics_endpoint: str
    text_analytics_key: str
    speech_key: str
    speech_location: str
    project_name: str = PROJECT_NAME
    deployment_name: str = DEPLOYMENT_NAME
    tts_voice: str = TTS_VOICE
    text_analytics_language: str = TEXT_ANALYTICS_LANGUAGE
    log_file: str = LOG_FILE
    log_level: str = LOG_LEVEL
    http_timeout: int = HTTP_TIMEOUT


def _read_settings_file(path: str) -> Dict[str, Any]:
    """Read the JSON settings file into a flat dictionary."""
    if not os.path.exists(path):
        raise ConfigurationError(f"Settings file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Settings file {path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Settings file {path} must contain a JSON object")
    return data


def _lookup(settings: Dict[str, Any], key: str, env_name: str) -> Optional[str]:
    # Environment wins over the file
    value = os.getenv(env_name)
    if value is None:
        value = settings.get(key)
    if value is None:
        return None
    return str(value).strip()


def get_config(settings_path: Optional[str] = None) -> Config:
    """
    Load configuration from the settings file and environment.

    Args:
        settings_path: Path to the JSON settings file. Defaults to
            ``$QNA_SETTINGS_FILE`` or ``appsettings.json`` in the working directory.

    Returns:
        Populated Config

    Raises:
        ConfigurationError: If the file is missing/malformed or a required key is absent
    """
    path = settings_path or os.getenv(SETTINGS_FILE_ENV) or SETTINGS_FILE
    settings = _read_settings_file(path)

    values: Dict[str, str] = {}
    missing = []
    for key, (env_name, field_name) in REQUIRED_SETTINGS.items():
        value = _lookup(settings, key, env_name)
        if not value:
            missing.append(key)
        else:
            values[field_name] = value

    if missing:
        raise ConfigurationError(
            f"Missing required settings in {path}: {', '.join(missing)}"
        )

    for field_name in ENDPOINT_FIELDS:
        if not values[field_name].startswith(("http://", "https://")):
            raise ConfigurationError(
                f"{field_name} must be an http(s) URL, got {values[field_name]!r}"
            )

    for key, (env_name, field_name) in OPTIONAL_SETTINGS.items():
        value = _lookup(settings, key, env_name)
        if value:
            values[field_name] = value

    logger.info(f"Configuration loaded from {path}")
    return Config(**values)
