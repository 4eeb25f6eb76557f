from __future__ import annotations

from typing import Optional

from django.conf import settings
from django.utils import translation

_DEFAULT_LANGUAGE = (
    (getattr(settings, "LANGUAGE_CODE", "en") or "en").split("-")[0].lower()
)
_SUPPORTED_LANGUAGES = {
    (code or "en").split("-")[0].lower()
    for code, _name in getattr(settings, "LANGUAGES", [("en", "English")])
} or {_DEFAULT_LANGUAGE}


def normalize_language_code(language_code: Optional[str]) -> str:
    """
    Lowercase a language code and strip its region. Unsupported languages fall
    back to the project default.
    """
    if not language_code:
        return _DEFAULT_LANGUAGE
    normalized = language_code.split("-")[0].lower()
    return normalized if normalized in _SUPPORTED_LANGUAGES else _DEFAULT_LANGUAGE


def resolve_language(request=None) -> str:
    """
    Pick the language for a request: ``?lang=`` first, then the locale
    middleware's choice, then Accept-Language, then the active language.
    """
    language_code = None
    if request is not None:
        query = getattr(request, "GET", None) or {}
        language_code = query.get("lang") or query.get("language")
        if not language_code:
            language_code = getattr(request, "LANGUAGE_CODE", None)
        if not language_code and hasattr(request, "META"):
            language_code = translation.get_language_from_request(request)
    return normalize_language_code(language_code or translation.get_language())



__all__ = [
    "normalize_language_code",
    "resolve_language",
]
