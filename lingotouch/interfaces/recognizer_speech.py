# interfaces/recognizer_speech.py

import logging

import speech_recognition as sr

from lingotouch.errors import SpeechRecognitionError
from lingotouch.interfaces.interface import SpeechInput

logger = logging.getLogger(__name__)


class RecognizerSpeechInput(SpeechInput):
    """
    Transcribes uploaded recordings (WAV, AIFF or FLAC) with the
    SpeechRecognition library's Google Web Speech recognizer.
    """

    def __init__(self, recognizer=None):
        self.recognizer = recognizer or sr.Recognizer()

    def transcribe(self, audio, language):
        try:
            with sr.AudioFile(audio) as source:
                recorded = self.recognizer.record(source)
        except (ValueError, EOFError, OSError) as e:
            logger.warning(f"Unreadable audio upload: {e}")
            raise SpeechRecognitionError("Audio must be WAV, AIFF or FLAC.") from e

        try:
            transcript = self.recognizer.recognize_google(recorded, language=language)
        except sr.UnknownValueError as e:
            logger.info("Speech recognizer could not understand the audio.")
            raise SpeechRecognitionError("No speech recognised.") from e
        except sr.RequestError as e:
            logger.error(f"Speech recognition service error: {e}")
            raise SpeechRecognitionError(f"Speech recognition unavailable: {e}") from e

        logger.debug(f"Transcript ({language}): {transcript}")
        return transcript
