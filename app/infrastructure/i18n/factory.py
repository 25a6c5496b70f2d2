"""Factory functions for creating i18n components.

Provides convenience functions for initializing translators with default
configurations suitable for the application.
"""

from pathlib import Path
from typing import Optional

import structlog
from infrastructure.i18n.loader import YAMLTranslationLoader
from infrastructure.i18n.models import FALLBACK_LOCALE, Locale
from infrastructure.i18n.translator import Translator

logger = structlog.get_logger()

DEFAULT_TRANSLATIONS_DIR = Path(__file__).resolve().parents[2] / "locales"


def create_translator(
    translations_dir: Optional[Path] = None,
    fallback_locale: Locale = FALLBACK_LOCALE,
) -> Translator:
    """Create a Translator with every locale loaded.

    If no translations_dir is provided, the app/locales directory is used.

    Args:
        translations_dir: Path to YAML translation files.
        fallback_locale: Locale to use when translations not found.

    Returns:
        Translator: Configured translator instance

    Raises:
        ValueError: If translations_dir does not exist or the fallback table
            is missing.

    Usage:
        translator = create_translator()
        dictionary = translator.get_dictionary("de")
    """
    if translations_dir is None:
        translations_dir = DEFAULT_TRANSLATIONS_DIR

    loader = YAMLTranslationLoader(translations_dir=translations_dir, use_cache=False)
    translator = Translator(
        dictionaries=loader.load_all(), fallback_locale=fallback_locale
    )

    logger.info(
        "translator_created",
        translations_dir=str(translations_dir),
        locale_count=len(translator.get_available_locales()),
    )
    return translator
