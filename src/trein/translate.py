# src/trein/translate.py
from __future__ import annotations

import logging
from typing import Optional

import requests

from .exceptions import TranslationAPIError, TranslationError
from .models import TranslationResult

__all__ = ["DEFAULT_DEEPL_BASE", "DeepLTranslator", "translate_text"]

logger = logging.getLogger("trein")

DEFAULT_DEEPL_BASE = "https://api-free.deepl.com"
TRANSLATE_PATH = "/v2/translate"

_STATUS_HINTS = {
    403: "check your DeepL API key (Free keys end in ':fx' and need the api-free host)",
    456: "your DeepL character quota is exhausted",
}


class DeepLTranslator:
    """
    Minimal DeepL v2 client: one form-encoded POST per call, no retries.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_DEEPL_BASE,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key
        self.base_url = (base_url or DEFAULT_DEEPL_BASE).rstrip("/")
        self.session = session or requests.Session()

    @property
    def url(self) -> str:
        return f"{self.base_url}{TRANSLATE_PATH}"

    def translate(
        self,
        text: str,
        target_lang: str,
        source_lang: Optional[str] = None,
    ) -> TranslationResult:
        form = [
            ("auth_key", self.api_key),
            ("text", text),
            ("target_lang", target_lang),
        ]
        if source_lang:
            form.append(("source_lang", source_lang))

        logger.debug("POST %s (target=%s, source=%s, %d chars)",
                     self.url, target_lang, source_lang, len(text))
        try:
            resp = self.session.post(self.url, data=form)
        except requests.RequestException as e:
            raise TranslationError(f"Failed to contact DeepL: {e}") from e

        if not 200 <= resp.status_code < 300:
            raise TranslationAPIError(
                self._status_message(resp), status_code=resp.status_code
            )

        try:
            payload = resp.json()
            translations = payload["translations"]
            if not isinstance(translations, list):
                raise TypeError("'translations' is not a list")
        except (ValueError, KeyError, TypeError) as e:
            raise TranslationError(f"Invalid JSON from DeepL: {e}") from e

        if not translations:
            raise TranslationError("No translation in response")

        first = translations[0]
        try:
            translated = first["text"]
        except (KeyError, TypeError) as e:
            raise TranslationError(f"Invalid JSON from DeepL: {e}") from e
        if not isinstance(translated, str):
            raise TranslationError(
                f"Invalid JSON from DeepL: 'text' is {type(translated).__name__}, expected a string"
            )
        translated = translated.strip()

        return TranslationResult(
            text=translated,
            detected_source_language=first.get("detected_source_language") or None,
        )

    @staticmethod
    def _status_message(resp: requests.Response) -> str:
        msg = f"DeepL returned an error status: HTTP {resp.status_code}"
        try:
            detail = resp.json().get("message")
        except (ValueError, AttributeError):
            detail = None
        if detail:
            msg = f"{msg} ({detail})"
        hint = _STATUS_HINTS.get(resp.status_code)
        if hint:
            msg = f"{msg}; {hint}"
        return msg


def translate_text(
    text: str,
    target_lang: str,
    source_lang: Optional[str] = None,
    *,
    api_key: str,
    base_url: str = DEFAULT_DEEPL_BASE,
    session: Optional[requests.Session] = None,
) -> TranslationResult:
    """One-shot helper around DeepLTranslator.translate()."""
    return DeepLTranslator(api_key, base_url, session=session).translate(
        text, target_lang, source_lang
    )
