"""Test data factories for deterministic test data generation."""

from tests.factories.auth import make_token
from tests.factories.cafes import make_cafe, make_cafes
from tests.factories.i18n import make_dictionary, make_translator
from tests.factories.settings import SITE_URL, make_settings
from tests.factories.submissions import (
    make_submission_create,
    make_submission_payload,
    make_submission_row,
)

__all__ = [
    "SITE_URL",
    "make_token",
    "make_cafe",
    "make_cafes",
    "make_dictionary",
    "make_translator",
    "make_settings",
    "make_submission_create",
    "make_submission_payload",
    "make_submission_row",
]
