"""
Fixtures for integration tests.

Integration tests drive the real application through its HTTP surface.
Only the system boundaries are replaced: repositories and the database
client are mocks, and the translator uses the sample tables.
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from api.dependencies.rate_limits import get_limiter
from infrastructure.services import (
    get_service_client,
    get_settings,
    get_supabase_client,
    get_translator,
)
from packages.cafes.dependencies import get_admin_cafe_repository, get_cafe_repository
from packages.cafes.repository import CafeRepository
from packages.seo.dependencies import get_sitemap_generator
from packages.seo.sitemap import SitemapGenerator
from packages.submissions.dependencies import get_submission_repository
from packages.submissions.repository import SubmissionRepository
from server import server
from tests.factories.settings import SITE_URL


@pytest.fixture
def cafe_repository():
    return MagicMock(spec=CafeRepository)


@pytest.fixture
def submission_repository():
    return MagicMock(spec=SubmissionRepository)


@pytest.fixture
def sitemap_generator():
    return SitemapGenerator(
        base_url=SITE_URL,
        major_cities=["berlin", "hamburg"],
        berlin_districts=["mitte"],
    )


@pytest.fixture
def app(
    settings,
    translator,
    mock_client,
    cafe_repository,
    submission_repository,
    sitemap_generator,
):
    """The application with mocked boundaries and rate limits disabled."""
    handler = server.handler
    handler.dependency_overrides.update(
        {
            get_settings: lambda: settings,
            get_translator: lambda: translator,
            get_supabase_client: lambda: mock_client,
            get_service_client: lambda: mock_client,
            get_cafe_repository: lambda: cafe_repository,
            get_admin_cafe_repository: lambda: cafe_repository,
            get_submission_repository: lambda: submission_repository,
            get_sitemap_generator: lambda: sitemap_generator,
        }
    )
    limiter = get_limiter()
    limiter.enabled = False

    yield handler

    limiter.enabled = True
    handler.dependency_overrides.clear()


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client
