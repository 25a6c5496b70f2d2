"""Integration tests for sitemap.xml and robots.txt."""

import pytest

from infrastructure.operations import OperationResult
from tests.factories.cafes import PLACE_ID, make_cafe
from tests.factories.settings import SITE_URL


@pytest.mark.integration
class TestSitemap:
    def test_sitemap(self, client, cafe_repository):
        cafe_repository.list_for_sitemap.return_value = OperationResult.success(
            data=[make_cafe(city="Köln")]
        )

        response = client.get("/sitemap.xml")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/xml")
        assert "s-maxage=3600" in response.headers["cache-control"]
        assert f"<loc>{SITE_URL}/en</loc>" in response.text
        assert f"<loc>{SITE_URL}/de/cities/koeln</loc>" in response.text
        assert f"<loc>{SITE_URL}/en/cafe/{PLACE_ID}</loc>" in response.text
        assert "<lastmod>2024-06-01</lastmod>" in response.text

    def test_database_failure_uses_major_cities(self, client, cafe_repository):
        cafe_repository.list_for_sitemap.return_value = OperationResult.transient_error(
            "down"
        )

        response = client.get("/sitemap.xml")

        assert response.status_code == 200
        assert f"<loc>{SITE_URL}/de/cities/hamburg</loc>" in response.text

    def test_is_not_redirected(self, client, cafe_repository):
        cafe_repository.list_for_sitemap.return_value = OperationResult.success(data=[])

        response = client.get("/sitemap.xml", follow_redirects=False)

        assert response.status_code == 200


@pytest.mark.integration
class TestRobots:
    def test_robots(self, client):
        response = client.get("/robots.txt")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "s-maxage=86400" in response.headers["cache-control"]
        assert "Disallow: /admin" in response.text
        assert f"Sitemap: {SITE_URL}/sitemap.xml" in response.text
