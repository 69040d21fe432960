# interfaces/mock_devices.py

import logging

from lingotouch.errors import SpeechRecognitionError
from lingotouch.interfaces.interface import (
    DEFAULT_VIBRATION_PATTERN, HapticFeedback, SpeechInput, SpeechOutput
)

logger = logging.getLogger(__name__)


class MockSpeechInput(SpeechInput):
    """
    Returns queued transcripts instead of listening.
    Raises SpeechRecognitionError once the queue is empty.
    """

    def __init__(self, transcripts=None):
        self.transcripts = list(transcripts or [])
        self.calls = []

    def transcribe(self, audio, language):
        self.calls.append(language)
        if not self.transcripts:
            raise SpeechRecognitionError("No speech recognised.")
        transcript = self.transcripts.pop(0)
        logger.debug(f"Mock transcript ({language}): {transcript}")
        return transcript


class MockSpeechOutput(SpeechOutput):
    def __init__(self):
        self.spoken = []

    def speak(self, text, language):
        self.spoken.append((text, language))
        logger.debug(f"Mock speech ({language}): {text}")
        return None


class MockHapticFeedback(HapticFeedback):
    def __init__(self):
        self.patterns = []

    def vibrate(self, pattern=DEFAULT_VIBRATION_PATTERN):
        self.patterns.append(tuple(pattern))
        logger.debug(f"Mock vibration: {list(pattern)}")
        return True
