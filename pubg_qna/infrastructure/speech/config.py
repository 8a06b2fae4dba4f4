"""
Speech service configuration shared by recognition and synthesis.
"""
import logging

from ...utils import load_speech_sdk

logger = logging.getLogger("speech_config")


def create_speech_config(key: str, region: str, voice: str):
    """
    Build the process-wide ``SpeechConfig``.
    Created once at startup and treated as read-only afterwards.
    """
    speechsdk = load_speech_sdk()
    speech_config = speechsdk.SpeechConfig(subscription=key, region=region)
    speech_config.speech_synthesis_voice_name = voice
    logger.info(f"Speech service configured for region {region} with voice {voice}")
    return speech_config
