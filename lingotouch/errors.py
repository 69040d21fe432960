# errors.py


class LingoTouchError(Exception):
    """Base class for collaborator failures."""


class TranslationError(LingoTouchError):
    """The remote translation service could not produce a translation."""


class SpeechRecognitionError(LingoTouchError):
    """No transcript could be produced from the recorded audio."""


class SpeechSynthesisError(LingoTouchError):
    """Text could not be turned into audio."""


class HapticFeedbackError(LingoTouchError):
    """The vibration device rejected or failed a pattern."""
