# interfaces/interface.py

DEFAULT_VIBRATION_PATTERN = (100, 50, 100)


class SpeechInput:
    def transcribe(self, audio, language):
        """Turn recorded audio into text in the given speech locale."""
        raise NotImplementedError("Subclasses must implement this method")


class SpeechOutput:
    def speak(self, text, language):
        """
        Say text aloud in the given speech locale.
        Returns the name of the produced audio file, or None if nothing was stored.
        """
        raise NotImplementedError("Subclasses must implement this method")


class HapticFeedback:
    def vibrate(self, pattern=DEFAULT_VIBRATION_PATTERN):
        """
        Pulse the motor. pattern alternates vibrate and pause durations in ms.
        Returns True if the pattern was handed to the device.
        Raises HapticFeedbackError when the device refuses the pattern.
        """
        raise NotImplementedError("Subclasses must implement this method")
