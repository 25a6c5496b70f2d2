"""Path helpers for locale-aware routing.

All helpers are pure string transformations over URL paths:

    strip_locale("/de/cities/berlin")        -> "/cities/berlin"
    with_locale("de", "/cities/berlin")      -> "/de/cities/berlin"
    switch_locale("/de/cities/berlin", "en") -> "/en/cities/berlin"
"""

from typing import Union

from infrastructure.i18n.models import Locale, is_valid_locale

LocaleLike = Union[Locale, str]


def _locale_value(locale: LocaleLike) -> str:
    return locale.value if isinstance(locale, Locale) else str(locale)


def strip_locale(pathname: str) -> str:
    """Strip the locale prefix from a pathname.

    Leading locale segments are removed until the first segment is not a
    locale, so stripping twice gives the same result as stripping once. The
    rest of the path, trailing slash included, is kept as written.

    Examples:
        "/de/cities/berlin" -> "/cities/berlin"
        "/de/cities/" -> "/cities/"
        "/en" -> "/"
        "/cities" -> "/cities" (unchanged)

    Args:
        pathname: URL path, with or without a leading slash.

    Returns:
        The path without locale prefix, "/" for root and locale-only paths.
    """
    if not pathname or pathname == "/":
        return "/"

    remainder = pathname
    stripped = False
    while True:
        head, _, tail = remainder.lstrip("/").partition("/")
        if not is_valid_locale(head):
            break
        remainder = "/" + tail
        stripped = True

    if not stripped:
        return pathname
    return remainder if remainder.strip("/") else "/"


def with_locale(locale: LocaleLike, path: str) -> str:
    """Add a locale prefix to a path, replacing any existing one.

    Examples:
        with_locale("de", "/cities/berlin") -> "/de/cities/berlin"
        with_locale("de", "/") -> "/de"
        with_locale("de", "cities") -> "/de/cities"
    """
    clean_path = strip_locale(path)
    prefix = _locale_value(locale)

    if clean_path == "/":
        return f"/{prefix}"

    if not clean_path.startswith("/"):
        clean_path = "/" + clean_path

    return f"/{prefix}{clean_path}"


def switch_locale(pathname: str, target_locale: LocaleLike) -> str:
    """Switch locale while preserving the rest of the path.

    Examples:
        switch_locale("/de/cities/berlin", "en") -> "/en/cities/berlin"
        switch_locale("/de", "en") -> "/en"
    """
    return with_locale(target_locale, strip_locale(pathname))


def prefix_with_locale(path: str, locale: LocaleLike) -> str:
    """Prefix an outbound link with a locale.

    Same contract as with_locale; kept for link builders that pass the path
    first.

    Example:
        prefix_with_locale("/cities", "de") -> "/de/cities"
    """
    return with_locale(locale, path)
