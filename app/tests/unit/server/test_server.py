"""Unit tests for server.server module."""

import pytest

from server import server


@pytest.mark.unit
class TestHandler:
    def test_middleware_stack(self):
        middleware = [m.cls.__name__ for m in server.handler.user_middleware]

        assert middleware == [
            "CORSMiddleware",
            "RequestContextMiddleware",
            "LocaleRedirectMiddleware",
        ]

    def test_rate_limiter_attached(self):
        assert server.handler.state.limiter is server.limiter

    def test_routes_registered(self):
        paths = {route.path for route in server.handler.routes}

        assert {
            "/health",
            "/version",
            "/sitemap.xml",
            "/robots.txt",
            "/api/v1/cafes/nearby",
            "/api/v1/submissions",
            "/api/v1/i18n/{locale}",
            "/{locale}",
            "/{locale}/cities/{city}",
            "/{locale}/cafe/{param}",
        } <= paths

    def test_page_routes_come_last(self):
        paths = [route.path for route in server.handler.routes]

        assert paths.index("/{locale}") > paths.index("/api/v1/i18n/{locale}")
        assert paths.index("/{locale}") > paths.index("/sitemap.xml")
