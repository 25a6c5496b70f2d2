"""Unit tests for packages.cafes.routing module.

Tests cover:
- Route parameter classification
- Detail query config (place_id vs id column)
- Identifier selection and hrefs, with and without locale
"""

from types import SimpleNamespace

import pytest

from packages.cafes.routing import (
    FALLBACK_LISTING_PATH,
    CafeIdKind,
    CafeRouteParam,
    classify,
    get_cafe_href,
    get_cafe_identifier,
    get_detail_route_query_config,
    has_valid_cafe_link,
)

PLACE_ID = "ChIJN1t_tDeuEmsRUsoyG83frY4"
RECORD_ID = "550e8400-e29b-41d4-a716-446655440000"


@pytest.mark.unit
class TestClassify:
    def test_place_id(self):
        assert classify(PLACE_ID) == CafeRouteParam(CafeIdKind.EXTERNAL_ID, PLACE_ID)

    def test_record_id(self):
        assert classify(RECORD_ID).kind == CafeIdKind.INTERNAL_ID

    def test_trims(self):
        assert classify(f"  {PLACE_ID} ").value == PLACE_ID

    @pytest.mark.parametrize("param", ["", "   ", None, 123, ["ChIJ"]])
    def test_invalid(self, param):
        result = classify(param)
        assert result.kind == CafeIdKind.INVALID
        assert result.value is None
        assert result.is_valid is False

    def test_prefix_is_case_sensitive(self):
        assert classify("chij123").kind == CafeIdKind.INTERNAL_ID


@pytest.mark.unit
class TestDetailRouteQueryConfig:
    def test_place_id_queries_place_id_column(self):
        config = get_detail_route_query_config(PLACE_ID)
        assert config.queried_column == "place_id"
        assert config.is_place_id is True
        assert config.param == PLACE_ID

    def test_record_id_queries_id_column(self):
        config = get_detail_route_query_config(f" {RECORD_ID} ")
        assert config.queried_column == "id"
        assert config.is_place_id is False
        assert config.param == RECORD_ID

    def test_accepts_classified_param(self):
        config = get_detail_route_query_config(classify(PLACE_ID))
        assert config.queried_column == "place_id"

    @pytest.mark.parametrize("param", ["", " ", None, 42])
    def test_invalid_returns_none(self, param):
        assert get_detail_route_query_config(param) is None


@pytest.mark.unit
class TestCafeLinks:
    def test_identifier_prefers_place_id(self):
        assert get_cafe_identifier({"place_id": PLACE_ID, "id": RECORD_ID}) == PLACE_ID

    def test_identifier_falls_back_to_id(self):
        assert get_cafe_identifier({"place_id": "  ", "id": RECORD_ID}) == RECORD_ID

    def test_identifier_trims(self):
        assert get_cafe_identifier({"id": f" {RECORD_ID} "}) == RECORD_ID

    def test_identifier_ignores_non_strings(self):
        assert get_cafe_identifier({"place_id": 5, "id": None}) is None

    def test_identifier_from_object(self):
        record = SimpleNamespace(place_id=None, id=RECORD_ID)
        assert get_cafe_identifier(record) == RECORD_ID

    def test_identifier_from_none(self):
        assert get_cafe_identifier(None) is None

    def test_href(self):
        assert get_cafe_href({"place_id": PLACE_ID}) == f"/cafe/{PLACE_ID}"

    def test_href_with_locale(self):
        assert get_cafe_href({"id": RECORD_ID}, "en") == f"/en/cafe/{RECORD_ID}"

    def test_href_without_identifier_falls_back(self):
        assert get_cafe_href({"id": ""}) == FALLBACK_LISTING_PATH
        assert get_cafe_href({}, "de") == "/de/cities"

    def test_has_valid_cafe_link(self):
        assert has_valid_cafe_link({"id": RECORD_ID}) is True
        assert has_valid_cafe_link({"id": " "}) is False
