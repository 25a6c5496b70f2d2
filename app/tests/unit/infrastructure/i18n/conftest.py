"""Feature-level fixtures for i18n system tests."""

import pytest
import yaml

from infrastructure.i18n import YAMLTranslationLoader


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML translation files.

    Returns a directory structure like:
    - en.yml
    - cafe.en.yml
    - de.yml
    """
    en = {
        "meta": {"siteName": "Café Directory"},
        "city": {"showAll": "Show all cafés in {city}", "showTop10": "Show top 10"},
    }
    with open(tmp_path / "en.yml", "w", encoding="utf-8") as f:
        yaml.dump(en, f, allow_unicode=True)

    en_cafe = {
        "meta": {"cafe": {"descWifi": "WiFi: {value}"}},
        "city": {"showTop10": "Top 10 only"},
    }
    with open(tmp_path / "cafe.en.yml", "w", encoding="utf-8") as f:
        yaml.dump(en_cafe, f, allow_unicode=True)

    de = {
        "meta": {"siteName": "Café-Verzeichnis"},
        "city": {"showAll": "Alle Cafés in {city} anzeigen"},
    }
    with open(tmp_path / "de.yml", "w", encoding="utf-8") as f:
        yaml.dump(de, f, allow_unicode=True)

    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLTranslationLoader with temp directory."""
    return YAMLTranslationLoader(translations_dir=temp_translations_dir)
