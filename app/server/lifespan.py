from contextlib import asynccontextmanager
from typing import AsyncIterator, TYPE_CHECKING

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.logging.setup import configure_logging
from infrastructure.services import (
    get_service_client,
    get_settings,
    get_supabase_client,
    get_translator,
)

if TYPE_CHECKING:
    from infrastructure.configuration import Settings
    from infrastructure.i18n import Translator


def _get_logger(settings: "Settings") -> BoundLogger:
    return configure_logging(settings=settings)


def _list_configs(settings: "Settings", logger: BoundLogger) -> None:
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


def _load_translations(logger: BoundLogger) -> "Translator":
    # A missing or broken translations directory aborts startup
    translator = get_translator()
    logger.info(
        "translations_loaded",
        locales=[locale.value for locale in translator.get_available_locales()],
        fallback_locale=translator.fallback_locale.value,
    )
    return translator


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = _get_logger(settings)

    app.state.settings = settings
    app.state.logger = logger

    logger.info("application_startup")
    _list_configs(settings, logger)
    app.state.translator = _load_translations(logger)

    yield

    logger.info("application_shutdown")
    _close_clients(logger)


def _close_clients(logger: BoundLogger) -> None:
    # Only clients that were created during the run
    for provider in (get_supabase_client, get_service_client):
        if provider.cache_info().currsize:
            provider().close()
    logger.info("database_clients_closed")
