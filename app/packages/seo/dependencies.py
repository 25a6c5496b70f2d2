"""Dependency providers for seo package."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from infrastructure.services import get_settings
from packages.cafes.cities import MAJOR_CITY_SLUGS
from packages.cafes.districts import BERLIN_DISTRICTS
from packages.seo.sitemap import SitemapGenerator


@lru_cache
def get_sitemap_generator() -> SitemapGenerator:
    """Process-wide generator; its cache lives as long as the process."""
    settings = get_settings()
    return SitemapGenerator(
        base_url=settings.server.SITE_URL,
        ttl_seconds=settings.sitemap.TTL_SECONDS,
        cafe_limit=settings.sitemap.CAFE_LIMIT,
        major_cities=MAJOR_CITY_SLUGS,
        berlin_districts=list(BERLIN_DISTRICTS),
    )


SitemapGeneratorDep = Annotated[SitemapGenerator, Depends(get_sitemap_generator)]
