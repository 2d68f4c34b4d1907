# shop/locale.py
"""
Current-language handling for the bilingual site.

The language is a plain value (``LocaleContext``) read from the request and
passed down to whatever needs to pick a translation. ``LocaleMiddleware`` activates the
visitor's language for each request from the language cookie, and
``apply_locale`` only writes that cookie when the visitor switches.
"""
from dataclasses import dataclass

from django.conf import settings
from django.utils import translation

AR = "ar"
EN = "en"
LANGUAGES = (AR, EN)
DEFAULT_LANGUAGE = AR
RTL_LANGUAGES = {AR}


@dataclass(frozen=True)
class Bilingual:
    ar: str
    en: str

    def get(self, language):
        return self.en if language == EN else self.ar


@dataclass(frozen=True)
class LocaleContext:
    language: str = DEFAULT_LANGUAGE

    def __post_init__(self):
        if self.language not in LANGUAGES:
            raise ValueError(f"Unsupported language: {self.language!r}")

    @property
    def direction(self):
        return "rtl" if self.language in RTL_LANGUAGES else "ltr"

    @property
    def is_rtl(self):
        return self.direction == "rtl"

    def t(self, value: Bilingual) -> str:
        return value.get(self.language)

    def pick(self, ar: str, en: str) -> str:
        return ar if self.language == AR else en

    def toggled(self) -> "LocaleContext":
        return LocaleContext(EN if self.language == AR else AR)


def locale_from_request(request) -> LocaleContext:
    language = getattr(request, "LANGUAGE_CODE", None) or translation.get_language() or DEFAULT_LANGUAGE
    language = language.split("-")[0].lower()
    if language not in LANGUAGES:
        language = DEFAULT_LANGUAGE
    return LocaleContext(language)


def apply_locale(response, context: LocaleContext):
    """Remember ``context`` in the language cookie; the next request activates it."""
    response.set_cookie(
        settings.LANGUAGE_COOKIE_NAME,
        context.language,
        max_age=365 * 24 * 60 * 60,
        samesite="Lax",
    )
    return response
