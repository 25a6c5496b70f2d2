"""Infrastructure configuration module - public API.

Centralized configuration for the café directory backend using Pydantic
BaseSettings, organized by concern.

Exports:
    Settings: Main settings class (for testing/overrides)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    supabase_url = settings.supabase.SUPABASE_URL
    site_url = settings.server.SITE_URL

    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings

__all__ = ["Settings"]
