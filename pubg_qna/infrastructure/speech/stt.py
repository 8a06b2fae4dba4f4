"""
Speech-to-text using the Azure speech service and the default microphone.
"""
import logging

from .results import RecognitionResult
from ...utils import load_speech_sdk, with_suppressed_audio_warnings

logger = logging.getLogger("speech_stt")

ERROR_REASON = "Error"


@with_suppressed_audio_warnings
def recognize_once(speech_config) -> RecognitionResult:
    """
    Capture a single utterance from the default microphone and transcribe it.

    Blocks until the service returns a final result. The microphone is held
    only for the lifetime of the recognizer created here.

    Returns:
        RecognitionResult with the transcript on success, or empty text and
        the SDK reason otherwise. An exception from the SDK is logged and
        reported with reason ``"Error"``.
    """
    speechsdk = load_speech_sdk()
    try:
        audio_config = speechsdk.audio.AudioConfig(use_default_microphone=True)
        recognizer = speechsdk.SpeechRecognizer(speech_config=speech_config, audio_config=audio_config)

        print("Listening...")
        result = recognizer.recognize_once_async().get()
        reason = result.reason.name

        if result.reason == speechsdk.ResultReason.RecognizedSpeech:
            logger.info(f"Speech recognition result: {result.text}")
            return RecognitionResult(text=result.text, reason=reason)

        detail = ""
        if result.reason == speechsdk.ResultReason.NoMatch:
            detail = str(result.no_match_details.reason)
        elif result.reason == speechsdk.ResultReason.Canceled:
            cancellation = result.cancellation_details
            detail = f"{cancellation.reason} {cancellation.error_details or ''}".strip()
    except Exception as e:
        logger.error(f"Speech recognition raised: {e}")
        return RecognitionResult(text="", reason=ERROR_REASON, detail=str(e))

    logger.warning("Speech recognition failed: %s %s", reason, detail)
    return RecognitionResult(text="", reason=reason, detail=detail)
