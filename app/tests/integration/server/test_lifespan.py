"""Integration tests for server.lifespan module."""

from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from server.lifespan import _close_clients, _list_configs


@pytest.mark.integration
class TestLifespan:
    def test_startup_stores_state(self, app):
        with TestClient(app):
            assert app.state.settings is not None
            assert app.state.logger is not None

    def test_startup_stores_translator(self, app, translator):
        with patch("server.lifespan.get_translator", return_value=translator):
            with TestClient(app):
                assert app.state.translator is translator

    def test_list_configs_logs_sections(self, settings):
        logger = MagicMock()

        _list_configs(settings, logger)

        logged_sections = {
            call.kwargs["config_setting"]
            for call in logger.info.call_args_list
            if call.args[0] == "configuration_loaded"
        }
        assert logged_sections == {"supabase", "i18n", "sitemap", "server"}

    def test_close_clients_only_closes_created(self):
        unused = MagicMock()
        unused.cache_info.return_value.currsize = 0
        used = MagicMock()
        used.cache_info.return_value.currsize = 1

        with patch("server.lifespan.get_supabase_client", unused), patch(
            "server.lifespan.get_service_client", used
        ):
            _close_clients(MagicMock())

        unused.return_value.close.assert_not_called()
        used.return_value.close.assert_called_once()

    def test_broken_translations_abort_startup(self, app):
        with patch(
            "server.lifespan.get_translator", side_effect=ValueError("no tables")
        ):
            with pytest.raises(ValueError):
                with TestClient(app):
                    pass
