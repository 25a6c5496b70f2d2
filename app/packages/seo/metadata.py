"""Localized page metadata: titles, descriptions, canonical and hreflang links."""

from typing import Dict, Optional

from pydantic import BaseModel

from infrastructure.i18n import (
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    Dictionary,
    Locale,
    Translator,
    strip_locale,
    with_locale,
)

DESCRIPTION_MAX_LENGTH = 160
OG_LOCALES = {Locale.DE: "de_DE", Locale.EN: "en_US"}


class PageMetadata(BaseModel):
    """Head metadata for a rendered page."""

    title: str
    description: str
    canonical: str
    alternates: Dict[str, str]
    og_locale: str
    site_name: str


def get_absolute_url(base_url: str, path: str) -> str:
    """Join the site URL and a path."""
    clean_path = path if path.startswith("/") else f"/{path}"
    return f"{base_url.rstrip('/')}{clean_path}"


def truncate_text(text: str, max_length: int) -> str:
    """Cut text to max_length, ending with "..." when shortened."""
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


def hreflang_alternates(base_url: str, path: str) -> Dict[str, str]:
    """Absolute URL of a page for every locale, plus x-default.

    Args:
        base_url: Public site URL
        path: Page path, with or without locale prefix

    Returns:
        Mapping of hreflang value -> absolute URL.
    """
    alternates = {
        locale.value: get_absolute_url(base_url, with_locale(locale, path))
        for locale in SUPPORTED_LOCALES
    }
    alternates["x-default"] = get_absolute_url(
        base_url, with_locale(DEFAULT_LOCALE, path)
    )
    return alternates


def make_page_metadata(
    locale: Locale,
    site_name: str,
    base_url: str,
    path: str,
    title: str,
    description: str,
) -> PageMetadata:
    """Assemble metadata from already rendered title and description."""
    clean_path = strip_locale(path)
    return PageMetadata(
        title=title,
        description=truncate_text(description, DESCRIPTION_MAX_LENGTH),
        canonical=get_absolute_url(base_url, with_locale(locale, clean_path)),
        alternates=hreflang_alternates(base_url, clean_path),
        og_locale=OG_LOCALES[locale],
        site_name=site_name,
    )


def build_page_metadata(
    translator: Translator,
    dictionary: Dictionary,
    base_url: str,
    path: str,
    title: str,
    description: str,
    variables: Optional[Dict[str, object]] = None,
) -> PageMetadata:
    """Render title and description keys and attach the page's links.

    Args:
        translator: Translator used for key resolution with fallback
        dictionary: Table of the page's locale
        base_url: Public site URL
        path: Page path without locale prefix
        title: Translation key of the title
        description: Translation key of the description
        variables: Placeholder values; siteName is always available

    Returns:
        PageMetadata for the page in the dictionary's locale.
    """
    site_name = translator.t(dictionary, "meta.siteName")
    values = {"siteName": site_name, **(variables or {})}
    return make_page_metadata(
        locale=dictionary.locale,
        site_name=site_name,
        base_url=base_url,
        path=path,
        title=translator.render(dictionary, title, values),
        description=translator.render(dictionary, description, values),
    )
