"""Supabase (PostgREST + auth) integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class SupabaseSettings(IntegrationSettings):
    """Hosted database and auth provider configuration.

    Environment Variables:
        SUPABASE_URL: Project URL (e.g. https://xyz.supabase.co)
        SUPABASE_ANON_KEY: Public anon key, subject to row-level security
        SUPABASE_SERVICE_ROLE_KEY: Service role key, bypasses row-level security
        SUPABASE_JWT_SECRET: Secret used to sign user access tokens
        SUPABASE_JWT_AUDIENCE: Expected audience of user access tokens
        SUPABASE_TIMEOUT: Request timeout in seconds

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        url = settings.supabase.SUPABASE_URL
        ```
    """

    SUPABASE_URL: str = Field(default="", alias="SUPABASE_URL")
    SUPABASE_ANON_KEY: str = Field(default="", alias="SUPABASE_ANON_KEY")
    SUPABASE_SERVICE_ROLE_KEY: str = Field(
        default="", alias="SUPABASE_SERVICE_ROLE_KEY"
    )
    SUPABASE_JWT_SECRET: str = Field(default="", alias="SUPABASE_JWT_SECRET")
    SUPABASE_JWT_AUDIENCE: str = Field(
        default="authenticated", alias="SUPABASE_JWT_AUDIENCE"
    )
    SUPABASE_TIMEOUT: int = Field(default=10, alias="SUPABASE_TIMEOUT")

    @property
    def is_configured(self) -> bool:
        """True when both the project URL and the anon key are set."""
        return bool(self.SUPABASE_URL and self.SUPABASE_ANON_KEY)
