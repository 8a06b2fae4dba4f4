"""
Tests for loading settings from appsettings.json and the environment.
"""
import json
import dataclasses

import pytest

from pubg_qna.config import (
    get_config, REQUIRED_SETTINGS, OPTIONAL_SETTINGS, SETTINGS_FILE_ENV
)
from pubg_qna.errors import ConfigurationError

SETTINGS = {
    "LanguageEndpoint": "https://lang.example.com/",
    "LanguageKey": "language-key",
    "TextAnalyticsEndpoint": "https://ta.example.com/",
    "TextAnalyticsKey": "ta-key",
    "SpeechKey": "speech-key",
    "SpeechLocation": "westeurope",
}


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for env_name, _ in list(REQUIRED_SETTINGS.values()) + list(OPTIONAL_SETTINGS.values()):
        monkeypatch.delenv(env_name, raising=False)
    monkeypatch.delenv(SETTINGS_FILE_ENV, raising=False)


def write_settings(tmp_path, data):
    path = tmp_path / "appsettings.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_loads_all_required_settings(tmp_path):
    config = get_config(write_settings(tmp_path, SETTINGS))

    assert config.language_endpoint == "https://lang.example.com/"
    assert config.language_key == "language-key"
    assert config.text_analytics_endpoint == "https://ta.example.com/"
    assert config.text_analytics_key == "ta-key"
    assert config.speech_key == "speech-key"
    assert config.speech_location == "westeurope"


def test_fixed_values_are_not_configurable(tmp_path):
    config = get_config(write_settings(tmp_path, dict(SETTINGS, ProjectName="Other")))

    assert config.project_name == "PubgQnA"
    assert config.deployment_name == "production"
    assert config.tts_voice == "en-US-AriaNeural"


def test_config_is_immutable(tmp_path):
    config = get_config(write_settings(tmp_path, SETTINGS))
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.language_key = "changed"


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        get_config(str(tmp_path / "missing.json"))


def test_malformed_json(tmp_path):
    path = tmp_path / "appsettings.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="not valid JSON"):
        get_config(str(path))


def test_non_object_json(tmp_path):
    with pytest.raises(ConfigurationError, match="JSON object"):
        get_config(write_settings(tmp_path, ["LanguageKey"]))


def test_missing_keys_are_listed(tmp_path):
    data = {k: v for k, v in SETTINGS.items() if k not in ("SpeechKey", "LanguageKey")}
    with pytest.raises(ConfigurationError) as exc:
        get_config(write_settings(tmp_path, data))

    assert "LanguageKey" in str(exc.value)
    assert "SpeechKey" in str(exc.value)


def test_blank_value_counts_as_missing(tmp_path):
    with pytest.raises(ConfigurationError, match="SpeechLocation"):
        get_config(write_settings(tmp_path, dict(SETTINGS, SpeechLocation="  ")))


def test_endpoint_must_be_http_url(tmp_path):
    with pytest.raises(ConfigurationError, match="language_endpoint"):
        get_config(write_settings(tmp_path, dict(SETTINGS, LanguageEndpoint="lang.example.com")))


def test_configuration_error_is_value_error(tmp_path):
    with pytest.raises(ValueError):
        get_config(str(tmp_path / "missing.json"))


def test_environment_overrides_file(tmp_path, monkeypatch):
    monkeypatch.setenv("SPEECH_KEY", "env-speech-key")
    monkeypatch.setenv("LANGUAGE_ENDPOINT", "https://env-lang.example.com")
    config = get_config(write_settings(tmp_path, SETTINGS))

    assert config.speech_key == "env-speech-key"
    assert config.language_endpoint == "https://env-lang.example.com"


def test_environment_fills_missing_keys(tmp_path, monkeypatch):
    data = {k: v for k, v in SETTINGS.items() if k != "TextAnalyticsKey"}
    monkeypatch.setenv("TEXT_ANALYTICS_KEY", "from-env")
    assert get_config(write_settings(tmp_path, data)).text_analytics_key == "from-env"


def test_optional_settings(tmp_path):
    data = dict(SETTINGS, TextAnalyticsLanguage="sv", LogFile="/tmp/qna-test.log", LogLevel="INFO")
    config = get_config(write_settings(tmp_path, data))

    assert config.text_analytics_language == "sv"
    assert config.log_file == "/tmp/qna-test.log"
    assert config.log_level == "INFO"


def test_optional_settings_defaults(tmp_path):
    config = get_config(write_settings(tmp_path, SETTINGS))
    assert config.text_analytics_language == "en"
    assert config.log_level == "DEBUG"


def test_settings_path_from_environment(tmp_path, monkeypatch):
    path = write_settings(tmp_path, SETTINGS)
    monkeypatch.setenv(SETTINGS_FILE_ENV, path)
    assert get_config().speech_location == "westeurope"
