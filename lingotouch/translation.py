# translation.py

import logging

import requests

from lingotouch.errors import TranslationError

logger = logging.getLogger(__name__)


class TranslationClient:
    """
    Client for the remote translation service.
    Sends {text, sourceLang, targetLang} and expects {translated} back.
    """

    def __init__(self, url, timeout=10):
        self.url = url
        self.timeout = timeout

    def translate(self, text, settings):
        payload = settings.to_request(text)
        logger.debug(f"Sending translation request to {self.url}: {payload}")

        try:
            resp = requests.post(self.url, json=payload, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Translation request failed: {e}")
            raise TranslationError(f"Translation service unavailable: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            logger.error(f"Translation service returned a non-JSON body: {e}")
            raise TranslationError("Translation service returned an invalid response.") from e

        translated = data.get('translated') if isinstance(data, dict) else None
        if not isinstance(translated, str):
            logger.error(f"Translation response has no 'translated' field: {data}")
            raise TranslationError("Translation service response is missing 'translated'.")

        logger.info(f"Translated {settings.source_lang} -> {settings.target_lang}: {translated!r}")
        return translated
