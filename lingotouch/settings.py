# settings.py

from collections import OrderedDict
from dataclasses import dataclass, replace

# code -> (display name, speech locale)
LANGUAGES = OrderedDict([
    ('en', ('English', 'en-US')),
    ('es', ('Spanish', 'es-ES')),
    ('fr', ('French', 'fr-FR')),
    ('de', ('German', 'de-DE')),
    ('hi', ('Hindi', 'hi-IN')),
    ('bn', ('Bengali', 'bn-IN')),
])

DEFAULT_SOURCE_LANG = 'en'
DEFAULT_TARGET_LANG = 'es'

_TRUE_STRINGS = ('true', '1', 'on', 'yes')


def _as_bool(value):
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def speech_locale(language):
    """Return the speech locale for a language code, e.g. 'es' -> 'es-ES'."""
    try:
        return LANGUAGES[language][1]
    except (KeyError, TypeError):
        raise ValueError(f"Unsupported language: {language!r}")


@dataclass(frozen=True)
class TranslationSettings:
    """
    Everything the page lets the user choose before translating.
    Instances never change; use with_changes() to derive a new one.
    """
    source_lang: str = DEFAULT_SOURCE_LANG
    target_lang: str = DEFAULT_TARGET_LANG
    dyslexia_font: bool = False
    high_contrast: bool = False

    def __post_init__(self):
        for field_name in ('source_lang', 'target_lang'):
            language = getattr(self, field_name)
            if not isinstance(language, str) or language not in LANGUAGES:
                raise ValueError(f"Unsupported language for {field_name}: {language!r}")

    @classmethod
    def from_mapping(cls, data):
        """
        Build settings from request data using the page's field names
        (sourceLang, targetLang, dyslexiaFont, highContrast).
        Missing keys fall back to the defaults.
        """
        data = data or {}
        return cls(
            source_lang=data.get('sourceLang') or DEFAULT_SOURCE_LANG,
            target_lang=data.get('targetLang') or DEFAULT_TARGET_LANG,
            dyslexia_font=_as_bool(data.get('dyslexiaFont', False)),
            high_contrast=_as_bool(data.get('highContrast', False)),
        )

    def with_changes(self, **changes):
        return replace(self, **changes)

    def to_request(self, text):
        """Body for the translation service."""
        return {
            'text': text,
            'sourceLang': self.source_lang,
            'targetLang': self.target_lang,
        }

    @property
    def speech_locale(self):
        return speech_locale(self.target_lang)

    @property
    def theme(self):
        return 'high-contrast' if self.high_contrast else 'default'

    @property
    def colors(self):
        """(background, text) colours for the page body."""
        return ('#000', '#fff') if self.high_contrast else ('#fff', '#000')

    @property
    def font_family(self):
        return 'OpenDyslexic' if self.dyslexia_font else None

    def to_dict(self):
        return {
            'sourceLang': self.source_lang,
            'targetLang': self.target_lang,
            'dyslexiaFont': self.dyslexia_font,
            'highContrast': self.high_contrast,
        }
