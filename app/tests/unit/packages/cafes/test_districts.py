"""Unit tests for packages.cafes.districts module."""

import pytest

from packages.cafes.districts import (
    BERLIN_DISTRICTS,
    district_path,
    filter_by_district,
    get_district_name,
    in_district,
    is_berlin_district,
)
from tests.factories.cafes import make_cafe


@pytest.mark.unit
class TestDistrictNames:
    @pytest.mark.parametrize("slug", ["mitte", "Kreuzberg", "prenzlauer-berg", "hbf"])
    def test_known(self, slug):
        assert is_berlin_district(slug) is True

    @pytest.mark.parametrize("slug", ["wedding", "", None, 3])
    def test_unknown(self, slug):
        assert is_berlin_district(slug) is False

    def test_name(self):
        assert get_district_name("neukoelln") == "Neukölln"
        assert get_district_name("NEUKOELLN") == "Neukölln"
        assert get_district_name("wedding") is None

    def test_path(self):
        assert district_path("mitte") == "/cities/berlin/mitte"

    def test_seven_districts(self):
        assert len(BERLIN_DISTRICTS) == 7


@pytest.mark.unit
class TestInDistrict:
    def test_address_mentions_district(self):
        cafe = make_cafe(address="Oranienstraße 10, 10999 Berlin-Kreuzberg")
        assert in_district(cafe, "kreuzberg") is True

    def test_umlaut_name(self):
        cafe = make_cafe(address="Weserstraße 5, 12047 Berlin Neukölln")
        assert in_district(cafe, "neukoelln") is True

    def test_hbf_aliases(self):
        assert in_district(make_cafe(address="Europaplatz 1, Berlin Hbf"), "hbf") is True
        assert in_district(make_cafe(address="Berlin Hauptbahnhof"), "hbf") is True

    def test_other_district(self):
        assert in_district(make_cafe(address="Torstraße 1, 10119 Berlin"), "mitte") is False

    def test_missing_address(self):
        assert in_district(make_cafe(address=None), "mitte") is False


@pytest.mark.unit
class TestFilterByDistrict:
    def test_keeps_matching_cafes(self):
        cafes = [
            make_cafe(id="a", address="Invalidenstraße 1, Berlin Mitte"),
            make_cafe(id="b", address="Bergmannstraße 2, Berlin Kreuzberg"),
        ]
        assert [cafe["id"] for cafe in filter_by_district(cafes, "Mitte")] == ["a"]

    def test_unknown_district(self):
        assert filter_by_district([make_cafe(address="Berlin Mitte")], "wedding") == []
