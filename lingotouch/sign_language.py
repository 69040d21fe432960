# sign_language.py

from urllib.parse import quote

DEFAULT_ANIMATION_URL = 'https://media.signlanguageapi.com/animate'

# Characters JavaScript's encodeURIComponent leaves alone.
_UNRESERVED = "-_.!~*'()"


def animation_url(text, base_url=DEFAULT_ANIMATION_URL):
    """
    URL of the sign language animation for the given text, or None when
    there is nothing to sign.
    """
    if not text:
        return None
    return f"{base_url}?text={quote(text, safe=_UNRESERVED)}"
