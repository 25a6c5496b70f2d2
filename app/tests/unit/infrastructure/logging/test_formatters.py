"""Unit tests for infrastructure.logging.formatters module."""

import pytest

from infrastructure.logging.formatters import SENSITIVE_PATTERNS, mask_sensitive_data


@pytest.mark.unit
class TestMaskSensitiveData:
    """Test suite for mask_sensitive_data processor factory."""

    def test_masks_password(self):
        processor = mask_sensitive_data()

        result = processor(None, "info", {"event": "login", "username": "u", "password": "p"})

        assert result["username"] == "u"
        assert result["password"] == "***REDACTED***"

    def test_masks_keys_containing_a_pattern(self):
        """Keys are matched by substring and case-insensitively."""
        processor = mask_sensitive_data()

        result = processor(
            None,
            "info",
            {
                "SUPABASE_SERVICE_ROLE_KEY": "key",
                "access_token": "abc",
                "Authorization": "Bearer x",
                "jwt_secret": "s",
            },
        )

        assert set(result.values()) == {"***REDACTED***"}

    def test_keeps_none_values(self):
        processor = mask_sensitive_data()

        result = processor(None, "info", {"token": None})

        assert result["token"] is None

    def test_custom_mask_and_patterns(self):
        processor = mask_sensitive_data(
            mask_value="[hidden]", additional_patterns=frozenset({"email"})
        )

        result = processor(
            None, "info", {"submitter_email": "a@b.de", "city": "Berlin"}
        )

        assert result["submitter_email"] == "[hidden]"
        assert result["city"] == "Berlin"

    def test_does_not_modify_input(self):
        processor = mask_sensitive_data()
        event_dict = {"password": "p"}

        processor(None, "info", event_dict)

        assert event_dict == {"password": "p"}

    def test_patterns_are_lowercase(self):
        assert all(pattern == pattern.lower() for pattern in SENSITIVE_PATTERNS)
