"""Unit tests for packages.cafes.display module."""

import pytest

from packages.cafes.display import (
    clean_domain,
    combine_description,
    format_address,
    format_work_score,
    get_heading_city,
    get_maps_url,
    is_valid_public_url,
    sanitize_url,
    strip_website_domain,
)


@pytest.mark.unit
class TestFormatAddress:
    def test_does_not_repeat_present_parts(self):
        data = {
            "address": "Nagelsweg 19, 20459 Hamburg",
            "city": "Hamburg",
            "zip_code": "20459",
            "country": "Germany",
        }
        assert format_address(data) == "Nagelsweg 19, 20459 Hamburg, Germany"

    def test_without_address(self):
        assert format_address({"city": "Berlin", "zip_code": "10119"}) == "10119, Berlin"

    def test_empty(self):
        assert format_address({}) == ""


@pytest.mark.unit
class TestDescriptions:
    def test_combine(self):
        assert combine_description(" Cozy ", "Fast WiFi") == "Cozy\n\nFast WiFi"

    def test_combine_missing_parts(self):
        assert combine_description(None, "Notes") == "Notes"
        assert combine_description(None, None) == ""


@pytest.mark.unit
class TestDomains:
    def test_clean_domain(self):
        assert clean_domain("https://www.example.com/path/") == "example.com/path"

    def test_clean_domain_empty(self):
        assert clean_domain(None) == ""

    def test_strip_website_domain(self):
        assert strip_website_domain("https://www.example.com/path") == "example.com"

    def test_strip_website_domain_without_scheme(self):
        assert strip_website_domain("kaffeebar.de") == "kaffeebar.de"

    def test_strip_website_domain_empty(self):
        assert strip_website_domain("") is None


@pytest.mark.unit
class TestMapsUrl:
    def test_stored_url_wins(self):
        assert get_maps_url({"google_maps_url": "https://maps.app/x"}) == "https://maps.app/x"

    def test_coordinates(self):
        url = get_maps_url({"latitude": 52.5, "longitude": 13.4})
        assert url == "https://www.google.com/maps/search/?api=1&query=52.5,13.4"

    def test_address_search(self):
        url = get_maps_url({"name": "Bar", "city": "Köln"})
        assert url.startswith("https://www.google.com/maps?q=Bar%2C%20K")


@pytest.mark.unit
class TestHeadingCity:
    def test_record_city(self):
        assert get_heading_city({"city": "Berlin", "address": "Weg 1, 50667 Köln"}) == "Berlin"

    def test_city_from_address(self):
        assert get_heading_city({"name": "Bar", "address": "Weg 1, 50667 Köln"}) == "Köln"

    def test_defaults_to_germany(self):
        assert get_heading_city({"name": "Bar"}) == "Germany"


@pytest.mark.unit
class TestPublicUrls:
    @pytest.mark.parametrize(
        "url", ["https://example.com", "http://kaffeebar.de/menu"]
    )
    def test_valid(self, url):
        assert is_valid_public_url(url) is True

    @pytest.mark.parametrize(
        "url",
        [
            "http://localhost:3000",
            "http://127.0.0.1/",
            "ftp://example.com",
            "example.com",
            "",
            None,
        ],
    )
    def test_invalid(self, url):
        assert is_valid_public_url(url) is False

    def test_sanitize(self):
        assert sanitize_url("  https://example.com ") == "https://example.com"
        assert sanitize_url("http://localhost") is None
        assert sanitize_url("   ") is None


@pytest.mark.unit
class TestFormatWorkScore:
    def test_hundred_scale(self):
        assert format_work_score(72.4) == "72/100"

    def test_ten_scale(self):
        assert format_work_score(7.26) == "7.3/10"
        assert format_work_score(8) == "8.0/10"

    def test_none(self):
        assert format_work_score(None) is None
