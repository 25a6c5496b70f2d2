"""Translation service for retrieving and interpolating translated messages.

The Translator holds one preloaded Dictionary per locale and never touches
the filesystem after construction.
"""

import re
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from infrastructure.i18n.models import (
    FALLBACK_LOCALE,
    Dictionary,
    Locale,
    is_valid_locale,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()

PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")


def tmpl(template: str, variables: Optional[Mapping[str, Any]] = None) -> str:
    """Substitute {name} placeholders in a template.

    Each placeholder is replaced by the string form of the matching variable.
    Missing and None variables become an empty string. Substituted values are
    not scanned again.

    Args:
        template: String containing {name} placeholders.
        variables: Mapping of placeholder name -> value.

    Returns:
        The interpolated string.

    Example:
        tmpl("Showing top 10 of {count}", {"count": 25})
        -> "Showing top 10 of 25"
    """
    variables = variables or {}

    def _replace(match: "re.Match[str]") -> str:
        value = variables.get(match.group(1))
        return "" if value is None else str(value)

    return PLACEHOLDER_PATTERN.sub(_replace, template)


def t(
    dictionary: Optional[Dictionary],
    key: str,
    fallback: Optional[Dictionary] = None,
) -> str:
    """Resolve a dotted key against a table, then against the fallback table.

    Never raises: an unresolved key is returned verbatim.

    Args:
        dictionary: Table of the requested locale.
        key: Dot-separated key (e.g. "city.showAll").
        fallback: Table consulted when the first lookup fails.

    Returns:
        The translated string, or the key itself.
    """
    message = dictionary.lookup(key) if dictionary is not None else None
    if message is not None:
        return message

    if fallback is not None and fallback is not dictionary:
        message = fallback.lookup(key)
        if message is not None:
            logger.debug(
                "used_fallback_translation",
                key=key,
                requested_locale=dictionary.locale.value if dictionary else None,
                fallback_locale=fallback.locale.value,
            )
            return message

    logger.warning(
        "translation_not_found",
        key=key,
        locale=dictionary.locale.value if dictionary else None,
    )
    return key


class Translator:
    """Read-only registry of translation tables.

    Built once at startup with every table already loaded, then shared.

    Attributes:
        fallback_locale: Locale whose table backs up missing keys.
    """

    def __init__(
        self,
        dictionaries: Mapping[Locale, Dictionary],
        fallback_locale: Locale = FALLBACK_LOCALE,
    ):
        """Initialize Translator.

        Args:
            dictionaries: Loaded tables by locale.
            fallback_locale: Locale to use when key or locale not found.

        Raises:
            ValueError: If the fallback locale's table is missing.
        """
        if fallback_locale not in dictionaries:
            raise ValueError(
                f"Fallback locale {fallback_locale.value} has no translation table"
            )
        self._dictionaries = MappingProxyType(dict(dictionaries))
        self.fallback_locale = fallback_locale
        logger.info(
            "initialized_translator",
            fallback_locale=fallback_locale.value,
            locales=[locale.value for locale in self._dictionaries],
        )

    @property
    def fallback_dictionary(self) -> Dictionary:
        return self._dictionaries[self.fallback_locale]

    def get_dictionary(self, locale: Any) -> Dictionary:
        """Get the table for a locale.

        Args:
            locale: Locale or locale tag. Unknown values are accepted.

        Returns:
            The table for the locale, or the fallback table when the locale
            is unrecognized or was not loaded.
        """
        if is_valid_locale(locale):
            dictionary = self._dictionaries.get(Locale(locale))
            if dictionary is not None:
                return dictionary
        return self.fallback_dictionary

    def t(self, dictionary: Dictionary, key: str) -> str:
        """Resolve a key with this translator's fallback table."""
        return t(dictionary, key, self.fallback_dictionary)

    def render(
        self,
        dictionary: Dictionary,
        key: str,
        variables: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Resolve a key and interpolate its placeholders."""
        return tmpl(self.t(dictionary, key), variables)

    def translate(
        self,
        locale: Any,
        key: str,
        variables: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Translate and interpolate a message for a locale.

        Args:
            locale: Locale or locale tag.
            key: Dot-separated key.
            variables: Optional placeholder values.

        Returns:
            The interpolated message, or the key when it does not resolve.
        """
        return self.render(self.get_dictionary(locale), key, variables)

    def has_message(self, key: str, locale: Locale) -> bool:
        """Check if translation exists for key in locale's own table."""
        dictionary = self._dictionaries.get(locale)
        return dictionary.has_message(key) if dictionary else False

    def get_available_locales(self) -> List[Locale]:
        """Get list of loaded locales."""
        return list(self._dictionaries.keys())
