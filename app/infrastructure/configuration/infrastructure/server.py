"""Server runtime settings."""

from typing import List

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """Server and public site configuration.

    Environment Variables:
        SITE_URL: Public base URL used for canonical links, sitemap and robots
            (default: http://localhost:3000)
        ALLOWED_ORIGINS: Comma separated CORS origins for non-production runs

    Example:
        ```python
        from infrastructure.services import get_settings

        base_url = get_settings().server.SITE_URL
        ```
    """

    SITE_URL: str = Field(default="http://localhost:3000", alias="SITE_URL")
    ALLOWED_ORIGINS: str = Field(
        default="http://localhost:3000,http://127.0.0.1:3000",
        alias="ALLOWED_ORIGINS",
    )

    @field_validator("SITE_URL", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Store the base URL without a trailing slash."""
        return v.rstrip("/")

    @property
    def allowed_origins(self) -> List[str]:
        """CORS origins as a list."""
        return [
            origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()
        ]
