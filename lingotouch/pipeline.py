# pipeline.py

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from lingotouch.braille import transcode
from lingotouch.errors import LingoTouchError
from lingotouch.interfaces.interface import DEFAULT_VIBRATION_PATTERN
from lingotouch.sign_language import DEFAULT_ANIMATION_URL, animation_url

logger = logging.getLogger(__name__)


@dataclass
class TranslationResult:
    text: str
    translated: str
    braille: str
    sign_animation_url: Optional[str]
    audio_file: Optional[str] = None
    vibrated: bool = False
    warnings: List[str] = field(default_factory=list)


class TranslationPipeline:
    """
    Translate text, then hand the translation to the braille transcoder,
    speech output and haptics.

    Only a translation failure stops the run. Adapters report speech and
    vibration problems as LingoTouchError subclasses; those are logged and
    reported as warnings on the result. Anything else is a bug and propagates.
    """

    def __init__(self, translator, speech_output, haptics,
                 vibration_pattern=DEFAULT_VIBRATION_PATTERN,
                 animation_base_url=DEFAULT_ANIMATION_URL):
        self.translator = translator
        self.speech_output = speech_output
        self.haptics = haptics
        self.vibration_pattern = tuple(vibration_pattern)
        self.animation_base_url = animation_base_url

    def run(self, text, settings):
        if not text or not text.strip():
            raise ValueError("Text cannot be empty.")

        translated = self.translator.translate(text, settings)
        result = TranslationResult(
            text=text,
            translated=translated,
            braille=transcode(translated),
            sign_animation_url=animation_url(translated, self.animation_base_url),
        )

        try:
            result.audio_file = self.speech_output.speak(translated, settings.speech_locale)
        except LingoTouchError as e:
            logger.warning(f"Speech output failed: {e}")
            result.warnings.append(str(e))

        try:
            result.vibrated = bool(self.haptics.vibrate(self.vibration_pattern))
            if not result.vibrated:
                result.warnings.append("Haptic feedback unavailable.")
        except LingoTouchError as e:
            logger.warning(f"Haptic feedback failed: {e}")
            result.warnings.append(f"Vibration failed: {e}")

        return result
