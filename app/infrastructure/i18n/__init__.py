"""i18n system - locale registry, path helpers and translations.

Main components:
- models: Locale, Dictionary, TranslationKey and locale validation
- paths: strip_locale, with_locale, switch_locale, prefix_with_locale
- loader: TranslationLoader and YAMLTranslationLoader
- translator: Translator registry plus t() and tmpl()
- resolvers: LocaleResolver and locale_from_pathname
"""

from infrastructure.i18n.factory import create_translator
from infrastructure.i18n.loader import TranslationLoader, YAMLTranslationLoader
from infrastructure.i18n.models import (
    DEFAULT_LOCALE,
    FALLBACK_LOCALE,
    SUPPORTED_LOCALES,
    Dictionary,
    Locale,
    TranslationKey,
    is_valid_locale,
    resolve_locale,
)
from infrastructure.i18n.paths import (
    prefix_with_locale,
    strip_locale,
    switch_locale,
    with_locale,
)
from infrastructure.i18n.resolvers import LocaleResolver, locale_from_pathname
from infrastructure.i18n.translator import Translator, t, tmpl

__all__ = [
    "DEFAULT_LOCALE",
    "FALLBACK_LOCALE",
    "SUPPORTED_LOCALES",
    "Locale",
    "Dictionary",
    "TranslationKey",
    "is_valid_locale",
    "resolve_locale",
    "strip_locale",
    "with_locale",
    "switch_locale",
    "prefix_with_locale",
    "locale_from_pathname",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "Translator",
    "LocaleResolver",
    "create_translator",
    "t",
    "tmpl",
]
