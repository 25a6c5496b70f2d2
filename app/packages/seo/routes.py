"""FastAPI routes for seo package."""

from fastapi import APIRouter
from fastapi.responses import Response

from infrastructure.services import SettingsDep
from packages.cafes.dependencies import CafeRepositoryDep
from packages.seo.dependencies import SitemapGeneratorDep
from packages.seo.robots import render_robots

router = APIRouter(tags=["seo"])

SITEMAP_HEADERS = {"Cache-Control": "public, s-maxage=3600, stale-while-revalidate"}
ROBOTS_HEADERS = {"Cache-Control": "public, s-maxage=86400, stale-while-revalidate"}


@router.get("/sitemap.xml", include_in_schema=False)
def get_sitemap(
    generator: SitemapGeneratorDep, repository: CafeRepositoryDep
) -> Response:
    """sitemaps.org document; always 200, empty urlset on failure."""
    return Response(
        content=generator.get(repository),
        media_type="application/xml; charset=utf-8",
        headers=SITEMAP_HEADERS,
    )


@router.get("/robots.txt", include_in_schema=False)
def get_robots(settings: SettingsDep) -> Response:
    return Response(
        content=render_robots(settings.server.SITE_URL),
        media_type="text/plain; charset=utf-8",
        headers=ROBOTS_HEADERS,
    )
