"""Sitemap generation settings."""

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class SitemapSettings(FeatureSettings):
    """Sitemap generation configuration.

    Environment Variables:
        SITEMAP_TTL_SECONDS: Seconds a generated sitemap is served from memory
        SITEMAP_CAFE_LIMIT: Maximum number of cafés queried for the sitemap
    """

    TTL_SECONDS: int = Field(default=300, alias="SITEMAP_TTL_SECONDS")
    CAFE_LIMIT: int = Field(default=5000, alias="SITEMAP_CAFE_LIMIT")
