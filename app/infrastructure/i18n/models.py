"""Translation models for the i18n system.

Defines the locale registry and the immutable translation table types.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple


class Locale(str, Enum):
    """Supported locales, used both as URL prefix and as table identifier."""

    EN = "en"
    DE = "de"

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Convert string to Locale enum.

        Args:
            locale_str: Locale string (e.g., "en", "de").

        Returns:
            Matching Locale enum value.

        Raises:
            ValueError: If locale string is not supported.
        """
        try:
            return cls(locale_str)
        except ValueError as e:
            raise ValueError(f"Unsupported locale: {locale_str}") from e


# Germany is the primary market, so routing defaults to German
DEFAULT_LOCALE = Locale.DE

# English is the most complete table and backs up missing keys
FALLBACK_LOCALE = Locale.EN

SUPPORTED_LOCALES: Tuple[Locale, ...] = tuple(Locale)


def is_valid_locale(value: Any) -> bool:
    """Check whether a value names a supported locale.

    Args:
        value: Candidate locale, usually a URL segment.

    Returns:
        True if value is one of the supported locale tags.
    """
    if isinstance(value, Locale):
        return True
    if not isinstance(value, str):
        return False
    return value in {locale.value for locale in SUPPORTED_LOCALES}


def resolve_locale(params: Any) -> Locale:
    """Get the locale from route params, falling back to the default.

    Args:
        params: Route params mapping with a "locale" entry.

    Returns:
        The requested Locale when valid, DEFAULT_LOCALE otherwise.
    """
    candidate = params.get("locale") if isinstance(params, Mapping) else None
    if is_valid_locale(candidate):
        return Locale(candidate)
    return DEFAULT_LOCALE


@dataclass(frozen=True)
class TranslationKey:
    """Dot-separated path addressing a leaf in a translation table.

    Keys have arbitrary depth (e.g. "home.hero.title"). Frozen for
    hashability.

    Attributes:
        parts: Path segments in traversal order.
    """

    parts: Tuple[str, ...]

    def __str__(self) -> str:
        """Return full dot-separated key path."""
        return ".".join(self.parts)

    @classmethod
    def from_string(cls, key_string: str) -> "TranslationKey":
        """Create TranslationKey from a dot-separated string.

        No schema check is done; an empty segment simply never resolves.
        """
        return cls(parts=tuple(key_string.split(".")))


def _freeze(value: Any) -> Any:
    """Recursively wrap mappings in read-only proxies."""
    if isinstance(value, Mapping):
        return MappingProxyType({str(k): _freeze(v) for k, v in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [_thaw(v) for v in value]
    return value


@dataclass(frozen=True)
class Dictionary:
    """Read-only translation table for a single locale.

    Attributes:
        locale: The Locale this table is for.
        messages: Nested read-only mapping of keys to sub-tables or strings.
        loaded_at: Timestamp (ISO 8601) when the table was loaded.
    """

    locale: Locale
    messages: Mapping[str, Any] = field(default_factory=dict)
    loaded_at: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "messages", _freeze(self.messages))

    def lookup(self, key: str) -> Optional[str]:
        """Resolve a dotted key against this table only.

        Traversal stops as soon as an intermediate node is missing or is not
        a mapping.

        Args:
            key: Dot-separated key (e.g. "city.showAll").

        Returns:
            The string leaf, or None when the key does not resolve to a string.
        """
        return resolve_path(self.messages, key)

    def has_message(self, key: str) -> bool:
        """Check if the key resolves to a string in this table."""
        return self.lookup(key) is not None

    def to_dict(self) -> dict:
        """Return a mutable deep copy of the messages."""
        return _thaw(self.messages)


def resolve_path(messages: Mapping[str, Any], key: str) -> Optional[str]:
    """Traverse a nested mapping along the segments of a dotted key.

    Args:
        messages: Nested mapping to traverse.
        key: Dot-separated key.

    Returns:
        The value if it is a string, None otherwise.
    """
    current: Any = messages
    for part in TranslationKey.from_string(key).parts:
        if not isinstance(current, Mapping):
            return None
        current = current.get(part)
        if current is None:
            return None
    return current if isinstance(current, str) else None
