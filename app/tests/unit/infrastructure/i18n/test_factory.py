"""Unit tests for infrastructure.i18n.factory and the shipped tables."""

import pytest

from infrastructure.i18n import Locale, create_translator
from infrastructure.i18n.factory import DEFAULT_TRANSLATIONS_DIR


def _leaf_keys(messages, prefix=""):
    keys = set()
    for name, value in messages.items():
        key = f"{prefix}{name}"
        if isinstance(value, dict):
            keys |= _leaf_keys(value, f"{key}.")
        else:
            keys.add(key)
    return keys


@pytest.mark.unit
class TestCreateTranslator:
    def test_loads_shipped_tables(self):
        translator = create_translator()

        assert set(translator.get_available_locales()) == {Locale.DE, Locale.EN}
        assert translator.fallback_locale == Locale.EN

    def test_missing_directory(self, tmp_path):
        with pytest.raises(ValueError):
            create_translator(tmp_path / "missing")

    def test_missing_fallback_table(self, tmp_path):
        (tmp_path / "de.yml").write_text("home:\n  title: Start\n", encoding="utf-8")

        with pytest.raises(ValueError):
            create_translator(tmp_path, fallback_locale=Locale.EN)


@pytest.mark.unit
class TestShippedTables:
    def test_german_keys_exist_in_english(self):
        """Every German key resolves against the fallback table."""
        translator = create_translator(DEFAULT_TRANSLATIONS_DIR)
        de_keys = _leaf_keys(translator.get_dictionary(Locale.DE).to_dict())
        en_keys = _leaf_keys(translator.get_dictionary(Locale.EN).to_dict())

        assert de_keys <= en_keys

    @pytest.mark.parametrize(
        "key",
        [
            "meta.siteName",
            "meta.home.title",
            "meta.city.title",
            "meta.cafe.titleWorkFriendly",
            "meta.cafe.descDiscover",
            "city.showingCount",
            "city.showAll",
            "city.showTop10",
            "city.noCafes",
        ],
    )
    def test_page_keys_resolve(self, key):
        translator = create_translator()

        for locale in (Locale.DE, Locale.EN):
            assert translator.translate(locale, key) != key
