"""Café directory configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from infrastructure.configuration.integrations import SupabaseSettings
from infrastructure.configuration.features import I18nSettings, SitemapSettings
from infrastructure.configuration.infrastructure import ServerSettings


class Settings(BaseSettings):
    """Café directory configuration settings - main aggregator.

    Settings are organized by concern:
    - **Integrations**: hosted database and auth provider (Supabase)
    - **Features**: translations, sitemap generation
    - **Infrastructure**: public site URL, CORS

    Environment Variables:
        PREFIX: Environment prefix; empty means production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Git commit SHA for deployment tracking

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        if settings.supabase.is_configured:
            ...
        ```
    """

    # Application-level settings
    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    # Integration settings
    supabase: SupabaseSettings

    # Feature settings
    i18n: I18nSettings
    sitemap: SitemapSettings

    # Infrastructure settings
    server: ServerSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "supabase": SupabaseSettings,
            "i18n": I18nSettings,
            "sitemap": SitemapSettings,
            "server": ServerSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
