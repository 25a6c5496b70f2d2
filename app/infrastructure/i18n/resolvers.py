"""Locale resolution logic for determining the request's language.

Provides strategies for resolving the locale from route params, URL paths
and the Accept-Language header.
"""

from typing import Any, Iterable, Optional

import structlog
from infrastructure.i18n.models import (
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    Locale,
    is_valid_locale,
    resolve_locale,
)

logger = structlog.get_logger().bind(component="i18n.resolver")


def locale_from_pathname(pathname: Optional[str]) -> Locale:
    """Get the locale from the first segment of a URL path.

    Examples:
        "/de/cities/berlin" -> Locale.DE
        "/cities" -> DEFAULT_LOCALE
        None -> DEFAULT_LOCALE
    """
    if not pathname:
        return DEFAULT_LOCALE

    segments = [segment for segment in pathname.split("/") if segment]
    if segments and is_valid_locale(segments[0]):
        return Locale(segments[0])
    return DEFAULT_LOCALE


class LocaleResolver:
    """Resolves the request locale from various context sources.

    Fallback chain used by resolve():
    1. Route params ("locale")
    2. Accept-Language header
    3. Default locale
    """

    def __init__(self, default_locale: Locale = DEFAULT_LOCALE):
        """Initialize locale resolver.

        Args:
            default_locale: Fallback locale when no preference found.
        """
        self.default_locale = default_locale
        self.log = logger.bind(default_locale=default_locale.value)

    def resolve_from_params(self, params: Any) -> Locale:
        """Resolve locale from route params, defaulting when absent."""
        return resolve_locale(params)

    def resolve_from_pathname(self, pathname: Optional[str]) -> Locale:
        """Resolve locale from the first path segment."""
        return locale_from_pathname(pathname)

    def resolve_from_header(
        self,
        accept_language: Optional[str],
        supported_locales: Optional[Iterable[Locale]] = None,
    ) -> Locale:
        """Resolve locale from HTTP Accept-Language header.

        Parses the header and returns the first supported language in
        quality order. Region subtags are ignored ("de-AT" matches "de").

        Args:
            accept_language: Accept-Language header value.
            supported_locales: Locales to match against.

        Returns:
            Resolved Locale, or default if none match.
        """
        if not accept_language:
            return self.default_locale

        supported = list(supported_locales or SUPPORTED_LOCALES)

        # "de-DE,de;q=0.9,en;q=0.8" -> [("de-DE", 1.0), ("de", 0.9), ("en", 0.8)]
        preferences = []
        for part in accept_language.split(","):
            lang_range = part.split(";")[0].strip()
            if not lang_range:
                continue
            quality = 1.0

            if ";" in part and "q=" in part:
                try:
                    quality = float(part.split("q=")[1])
                except ValueError:
                    quality = 1.0

            preferences.append((lang_range, quality))

        for lang_range, _ in sorted(preferences, key=lambda x: x[1], reverse=True):
            lang_code = lang_range.split("-")[0].lower()
            for locale in supported:
                if locale.value == lang_code:
                    self.log.debug("resolved_from_header", locale=locale.value)
                    return locale

        self.log.debug("no_matching_locale_in_header")
        return self.default_locale

    def resolve(
        self,
        params: Any = None,
        accept_language: Optional[str] = None,
    ) -> Locale:
        """Resolve locale using params first, then the header."""
        candidate = params.get("locale") if isinstance(params, dict) else None
        if is_valid_locale(candidate):
            return Locale(candidate)
        return self.resolve_from_header(accept_language)
