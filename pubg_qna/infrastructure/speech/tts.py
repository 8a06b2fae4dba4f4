"""
Text-to-speech using the Azure speech service and the default speaker.
"""
import logging

from .results import SynthesisResult
from ...utils import load_speech_sdk, with_suppressed_audio_warnings

logger = logging.getLogger("speech_tts")

SSML_OPEN_TAG = "<speak"
ERROR_REASON = "Error"


def is_ssml(text: str) -> bool:
    """True if the text is an SSML document, i.e. it opens with ``<speak``."""
    return text.lstrip().lower().startswith(SSML_OPEN_TAG)


@with_suppressed_audio_warnings
def speak_text(speech_config, text: str) -> SynthesisResult:
    """
    Speak plain text through the default output device.

    The speaker is held only for the lifetime of the synthesizer created here.
    SDK failures (no output device, missing audio libraries, bad region) are
    logged and reported as a non-completed result, never raised.
    """
    speechsdk = load_speech_sdk()
    try:
        audio_config = speechsdk.audio.AudioOutputConfig(use_default_speaker=True)
        synthesizer = speechsdk.SpeechSynthesizer(speech_config=speech_config, audio_config=audio_config)

        result = synthesizer.speak_text_async(text).get()
        reason = result.reason.name

        if result.reason == speechsdk.ResultReason.SynthesizingAudioCompleted:
            logger.info(f"Synthesized {len(text)} characters")
            return SynthesisResult(completed=True, reason=reason)

        detail = ""
        if result.reason == speechsdk.ResultReason.Canceled:
            cancellation = result.cancellation_details
            detail = f"{cancellation.reason} {cancellation.error_details or ''}".strip()
    except Exception as e:
        logger.error(f"Speech synthesis raised: {e}")
        return SynthesisResult(completed=False, reason=ERROR_REASON, detail=str(e))

    logger.error("Speech synthesis failed: %s %s", reason, detail)
    return SynthesisResult(completed=False, reason=reason, detail=detail)
