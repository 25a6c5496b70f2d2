"""Unit tests for packages.cafes.cities module."""

import pytest

from infrastructure.i18n import Locale
from packages.cafes.cities import (
    MAJOR_CITY_SLUGS,
    city_slug_aliases,
    count_cities,
    count_for_city,
    get_city_db_name,
    get_city_display_name,
    slugify_city,
)


@pytest.mark.unit
class TestSlugifyCity:
    @pytest.mark.parametrize(
        "name, slug",
        [
            ("Frankfurt am Main", "frankfurt-am-main"),
            ("München", "muenchen"),
            ("Köln", "koeln"),
            ("Düsseldorf", "duesseldorf"),
            ("Gießen", "giessen"),
            ("  Halle (Saale) ", "halle-saale"),
            ("Baden--Baden", "baden-baden"),
        ],
    )
    def test_slugify(self, name, slug):
        assert slugify_city(name) == slug

    @pytest.mark.parametrize("name", ["", None, 5])
    def test_empty(self, name):
        assert slugify_city(name) == ""


@pytest.mark.unit
class TestCityNames:
    def test_display_name_by_locale(self):
        assert get_city_display_name("muenchen", Locale.DE) == "München"
        assert get_city_display_name("muenchen", Locale.EN) == "Munich"

    def test_display_name_unknown_city(self):
        assert get_city_display_name("bad-homburg", Locale.DE) == "Bad Homburg"

    def test_db_name(self):
        assert get_city_db_name("koeln") == "Cologne"
        assert get_city_db_name("berlin") == "Berlin"


@pytest.mark.unit
class TestCountCities:
    def test_counts_and_skips_empty(self):
        rows = [{"city": "Berlin"}, {"city": "Berlin"}, {"city": "Hamburg"}, {"city": None}, {}]
        assert count_cities(rows) == {"Berlin": 2, "Hamburg": 1}


@pytest.mark.unit
class TestCityAliases:
    def test_aliases_cover_both_languages(self):
        assert city_slug_aliases("muenchen") == {"muenchen", "munich"}

    def test_unknown_city_is_its_own_alias(self):
        assert city_slug_aliases("Berlin") == {"berlin"}

    def test_count_for_city_sums_spellings(self):
        counts = {"München": 2, "Munich": 3, "Hamburg": 1}
        assert count_for_city(counts, "muenchen") == 5
        assert count_for_city(counts, "leipzig") == 0

    def test_major_cities_start_with_berlin(self):
        assert MAJOR_CITY_SLUGS[0] == "berlin"
        assert len(MAJOR_CITY_SLUGS) == 6
