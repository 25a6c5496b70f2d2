"""Shared fixtures for unit and integration tests.

The app directory is put on sys.path by the pytest configuration in
pyproject.toml, so application packages import as top-level modules.
"""

from unittest.mock import MagicMock

import pytest

from integrations.supabase import SupabaseClient
from tests.factories.i18n import make_translator
from tests.factories.settings import make_settings


@pytest.fixture
def settings():
    """Settings with a configured database, JWT secret and site URL."""
    return make_settings()


@pytest.fixture
def translator():
    """Translator with the sample en and de tables, en as fallback."""
    return make_translator()


@pytest.fixture
def mock_client():
    """Mock database client; configure select/insert/update per test."""
    return MagicMock(spec=SupabaseClient)
