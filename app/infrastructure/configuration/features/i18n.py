"""Translation settings."""

from typing import Optional

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Translation table configuration.

    Environment Variables:
        I18N_TRANSLATIONS_DIR: Directory holding <locale>.yml files
            (default: app/locales)
        I18N_FALLBACK_LOCALE: Locale whose table backs up missing keys
            (default: en)
    """

    TRANSLATIONS_DIR: Optional[str] = Field(
        default=None, alias="I18N_TRANSLATIONS_DIR"
    )
    FALLBACK_LOCALE: str = Field(default="en", alias="I18N_FALLBACK_LOCALE")
