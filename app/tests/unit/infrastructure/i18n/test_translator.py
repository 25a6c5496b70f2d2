"""Tests for infrastructure.i18n.translator module."""

from unittest.mock import patch

import pytest

from infrastructure.i18n import Locale, Translator, create_translator, t, tmpl
from infrastructure.i18n.factory import DEFAULT_TRANSLATIONS_DIR
from tests.factories.i18n import make_dictionary


class TestTmpl:
    """Tests for tmpl() placeholder substitution."""

    def test_substitutes_variables(self):
        assert tmpl("Showing top {count} of {total}", {"count": 10, "total": 25}) == (
            "Showing top 10 of 25"
        )

    def test_missing_variable_becomes_empty(self):
        assert tmpl("Hello {name}!", {}) == "Hello !"

    def test_none_variable_becomes_empty(self):
        assert tmpl("Hello {name}!", {"name": None}) == "Hello !"

    def test_no_variables(self):
        assert tmpl("Plain text") == "Plain text"

    def test_substituted_values_are_not_rescanned(self):
        assert tmpl("{a}", {"a": "{b}", "b": "x"}) == "{b}"

    def test_non_identifier_braces_untouched(self):
        assert tmpl("{not valid} {ok}", {"ok": 1}) == "{not valid} 1"


class TestT:
    """Tests for module-level t()."""

    def test_resolves_in_requested_table(self):
        de = make_dictionary(Locale.DE)
        assert t(de, "city.showTop10", make_dictionary(Locale.EN)) == "Top 10 anzeigen"

    def test_falls_back(self):
        de = make_dictionary(Locale.DE)
        en = make_dictionary(Locale.EN)
        assert t(de, "city.noCafes", en) == "No cafés in {city} yet"

    def test_unresolved_returns_key(self):
        de = make_dictionary(Locale.DE)
        assert t(de, "does.not.exist", make_dictionary(Locale.EN)) == "does.not.exist"

    def test_without_fallback(self):
        assert t(make_dictionary(Locale.DE), "city.noCafes") == "city.noCafes"

    def test_none_dictionary_uses_fallback(self):
        assert t(None, "meta.siteName", make_dictionary(Locale.EN)) == "Café Directory"

    def test_logs_missing_key(self):
        with patch("infrastructure.i18n.translator.logger") as mock_logger:
            t(make_dictionary(Locale.DE), "does.not.exist")
        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args[0][0] == "translation_not_found"

    def test_logs_fallback_use(self):
        with patch("infrastructure.i18n.translator.logger") as mock_logger:
            t(make_dictionary(Locale.DE), "city.noCafes", make_dictionary(Locale.EN))
        mock_logger.debug.assert_called_once()
        mock_logger.warning.assert_not_called()


class TestTranslator:
    """Tests for Translator registry."""

    def test_missing_fallback_table_raises(self):
        with pytest.raises(ValueError, match="Fallback locale"):
            Translator({Locale.DE: make_dictionary(Locale.DE)}, fallback_locale=Locale.EN)

    def test_get_dictionary(self, translator):
        assert translator.get_dictionary("de").locale == Locale.DE
        assert translator.get_dictionary(Locale.EN).locale == Locale.EN

    def test_get_dictionary_unknown_locale_uses_fallback(self, translator):
        assert translator.get_dictionary("fr") is translator.fallback_dictionary

    def test_get_dictionary_unloaded_locale_uses_fallback(self):
        translator = Translator({Locale.EN: make_dictionary(Locale.EN)})
        assert translator.get_dictionary("de").locale == Locale.EN

    def test_translate(self, translator):
        assert translator.translate("de", "city.showAll", {"city": "Köln"}) == (
            "Alle Cafés in Köln anzeigen"
        )

    def test_translate_falls_back_per_key(self, translator):
        assert translator.translate("de", "city.noCafes", {"city": "Köln"}) == (
            "No cafés in Köln yet"
        )

    def test_translate_unknown_key(self, translator):
        assert translator.translate("en", "x.y") == "x.y"

    def test_has_message_checks_own_table(self, translator):
        assert translator.has_message("city.noCafes", Locale.EN) is True
        assert translator.has_message("city.noCafes", Locale.DE) is False

    def test_available_locales(self, translator):
        assert set(translator.get_available_locales()) == {Locale.EN, Locale.DE}


class TestShippedTranslations:
    """The translation files shipped with the app."""

    @pytest.fixture
    def shipped(self):
        return create_translator()

    def test_default_directory_exists(self):
        assert DEFAULT_TRANSLATIONS_DIR.is_dir()

    def test_both_locales_loaded(self, shipped):
        assert set(shipped.get_available_locales()) == {Locale.EN, Locale.DE}

    @pytest.mark.parametrize(
        "key",
        [
            "meta.siteName",
            "meta.home.title",
            "meta.city.title",
            "meta.cafe.titleWorkFriendly",
            "meta.cafe.descDiscover",
            "city.showingAll",
            "city.showingCount",
            "city.showAll",
            "city.showTop10",
        ],
    )
    def test_key_present_in_both_tables(self, shipped, key):
        assert shipped.has_message(key, Locale.EN)
        assert shipped.has_message(key, Locale.DE)

    def test_german_key_missing_falls_back_to_english(self, shipped):
        dictionary = shipped.get_dictionary(Locale.DE)
        assert not shipped.has_message("meta.cafe.notFoundDescription", Locale.DE)
        assert shipped.t(dictionary, "meta.cafe.notFoundDescription").startswith("The café")
