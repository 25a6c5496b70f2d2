"""Translation loading interface and implementations.

Defines the contract for loading translation tables and provides the YAML
based loader.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

import structlog
import yaml

from infrastructure.i18n.models import Dictionary, Locale

logger = structlog.get_logger()


class TranslationLoader(ABC):
    """Abstract base for translation loaders."""

    @abstractmethod
    def load(self, locale: Locale) -> Dictionary:
        """Load the translation table for a specific locale.

        Raises:
            FileNotFoundError: If translation files not found.
            ValueError: If translation format is invalid.
        """

    @abstractmethod
    def load_all(self) -> Dict[Locale, Dictionary]:
        """Load translation tables for all supported locales."""


def deep_merge(base: Dict[str, Any], other: Dict[str, Any]) -> Dict[str, Any]:
    """Merge nested mappings; later leaves override earlier ones.

    Args:
        base: Mapping to merge into (modified in place).
        other: Mapping whose entries take precedence.

    Returns:
        The merged base mapping.
    """
    for key, value in other.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML translation files.

    Expects files named <locale>.yml or <domain>.<locale>.yml in the
    translations directory. All files of a locale are deep-merged in sorted
    filename order.

    Attributes:
        translations_dir: Path to directory containing YAML files.
        cache: Loaded tables (locale -> table) when caching is enabled.
    """

    def __init__(
        self,
        translations_dir: Path,
        use_cache: bool = True,
    ):
        """Initialize YAML translation loader.

        Args:
            translations_dir: Path to directory with YAML translation files.
            use_cache: Whether to cache loaded tables in memory.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[Locale, Dictionary] = {}

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def _files_for(self, locale: Locale) -> list:
        files = set(self.translations_dir.glob(f"{locale.value}.yml"))
        files.update(self.translations_dir.glob(f"*.{locale.value}.yml"))
        return sorted(files)

    def load(self, locale: Locale) -> Dictionary:
        """Load the table for a locale from its YAML files.

        Args:
            locale: Locale to load.

        Returns:
            Read-only Dictionary with the merged messages.

        Raises:
            FileNotFoundError: If no YAML files found for locale.
            ValueError: If YAML parsing fails or a document is not a mapping.
        """
        if self.use_cache and locale in self.cache:
            logger.debug("loaded_from_cache", locale=locale.value)
            return self.cache[locale]

        yaml_files = self._files_for(locale)
        if not yaml_files:
            raise FileNotFoundError(
                f"No translation files found for locale {locale.value} in {self.translations_dir}"
            )

        messages: Dict[str, Any] = {}
        for yaml_file in yaml_files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise ValueError(f"Failed to parse {yaml_file}: {e}") from e

            if data is None:
                continue
            if not isinstance(data, dict):
                raise ValueError(
                    f"Translation file {yaml_file} must contain a mapping at the top level"
                )
            deep_merge(messages, data)

        dictionary = Dictionary(
            locale=locale,
            messages=messages,
            loaded_at=datetime.now(timezone.utc).isoformat(),
        )

        logger.info(
            "loaded_translations",
            locale=locale.value,
            file_count=len(yaml_files),
            namespace_count=len(messages),
        )

        if self.use_cache:
            self.cache[locale] = dictionary

        return dictionary

    def load_all(self) -> Dict[Locale, Dictionary]:
        """Load tables for every supported locale that has files.

        Returns:
            Dict mapping each Locale to its Dictionary.

        Raises:
            ValueError: If no translation files found at all.
        """
        result = {}
        for locale in Locale:
            try:
                result[locale] = self.load(locale)
            except FileNotFoundError:
                logger.warning("could_not_load_locale", locale=locale.value)

        if not result:
            raise ValueError(f"No translation files found in {self.translations_dir}")

        return result

    def clear_cache(self) -> None:
        """Clear all cached tables."""
        self.cache.clear()
        logger.info("cleared_translation_cache")
