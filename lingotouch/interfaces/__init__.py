# interfaces/__init__.py

from lingotouch.interfaces.interface import HapticFeedback, SpeechInput, SpeechOutput
from lingotouch.interfaces.mock_devices import MockHapticFeedback, MockSpeechInput, MockSpeechOutput

__all__ = [
    'SpeechInput', 'SpeechOutput', 'HapticFeedback',
    'MockSpeechInput', 'MockSpeechOutput', 'MockHapticFeedback',
]
