"""
Utilities for the noisy native speech SDK: quiet imports and stderr suppression.
"""
import os
import sys
import warnings
import functools
import importlib
from typing import Any, Callable


def import_quietly(func: Callable[[], Any]) -> Any:
    """
    Run a function while suppressing Python-level stderr output and warnings.
    Used for imports of libraries that print banners or deprecation noise.
    """
    original_stderr = sys.stderr
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            with open(os.devnull, 'w') as devnull:
                sys.stderr = devnull
                return func()
    finally:
        sys.stderr = original_stderr


def load_speech_sdk():
    """Import the Azure speech SDK on first use."""
    return import_quietly(lambda: importlib.import_module("azure.cognitiveservices.speech"))


# Keep ALSA from trying to start a JACK server when the microphone opens
os.environ.setdefault("JACK_NO_START_SERVER", "1")


def with_suppressed_audio_warnings(func):
    """
    Decorator that silences native audio warnings during a call.
    Redirects file descriptor 2, which catches output from C libraries
    that bypass sys.stderr.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            original_stderr_fd = os.dup(2)
            null_fd = os.open(os.devnull, os.O_WRONLY)
            os.dup2(null_fd, 2)
            os.close(null_fd)
        except OSError:
            original_stderr_fd = None

        try:
            return func(*args, **kwargs)
        finally:
            if original_stderr_fd is not None:
                os.dup2(original_stderr_fd, 2)
                os.close(original_stderr_fd)

    return wrapper
