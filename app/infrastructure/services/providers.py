"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache
from pathlib import Path

from infrastructure.configuration import Settings
from infrastructure.i18n import Locale, Translator, create_translator
from integrations.supabase import SupabaseClient


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    This is the single source of truth for settings across the entire application.
    The @lru_cache decorator ensures only ONE instance is created per process,
    even if called from multiple packages.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/version")
        def get_version(settings: SettingsDep):
            return {"version": settings.GIT_SHA}

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_translator() -> Translator:
    """
    Get application-scoped translator singleton.

    All translation tables are loaded on the first call; the server lifespan
    calls this at startup so a broken translations directory aborts boot.

    Returns:
        Translator: Cached translator with every locale loaded.
    """
    settings = get_settings()
    translations_dir = settings.i18n.TRANSLATIONS_DIR
    return create_translator(
        translations_dir=Path(translations_dir) if translations_dir else None,
        fallback_locale=Locale.from_string(settings.i18n.FALLBACK_LOCALE),
    )


@lru_cache
def get_supabase_client() -> SupabaseClient:
    """
    Get the database client for public reads (anon key, row-level security applies).

    Returns:
        SupabaseClient: Cached client configured from settings.supabase.
    """
    settings = get_settings()
    return SupabaseClient(
        base_url=settings.supabase.SUPABASE_URL,
        api_key=settings.supabase.SUPABASE_ANON_KEY,
        timeout=settings.supabase.SUPABASE_TIMEOUT,
    )


@lru_cache
def get_service_client() -> SupabaseClient:
    """
    Get the database client for trusted writes (service role key).

    Falls back to the anon key when no service role key is configured, in
    which case row-level security decides what is allowed.

    Returns:
        SupabaseClient: Cached client configured from settings.supabase.
    """
    settings = get_settings()
    return SupabaseClient(
        base_url=settings.supabase.SUPABASE_URL,
        api_key=settings.supabase.SUPABASE_SERVICE_ROLE_KEY
        or settings.supabase.SUPABASE_ANON_KEY,
        timeout=settings.supabase.SUPABASE_TIMEOUT,
    )
