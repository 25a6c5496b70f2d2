"""
sitemaps.org XML generation.

The sitemap lists every public page once per locale. Generation never fails:
any error yields an empty urlset. A complete document is served from memory
until its TTL expires; one built while the database was unavailable is not
kept.
"""

import time
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional, Sequence, Tuple
from urllib.parse import quote

import structlog

from infrastructure.i18n import SUPPORTED_LOCALES, with_locale
from packages.cafes.cities import count_cities, slugify_city
from packages.cafes.repository import CafeRepository
from packages.cafes.routing import get_cafe_href

logger = structlog.get_logger()

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"

EMPTY_SITEMAP = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    f'<urlset xmlns="{SITEMAP_NAMESPACE}"></urlset>'
)

# (path without locale, priority, changefreq)
STATIC_PAGES = (
    ("/", "1.0", "daily"),
    ("/cities", "0.9", "weekly"),
    ("/submit", "0.8", "monthly"),
    ("/find/wifi", "0.7", "monthly"),
    ("/find/outlets", "0.7", "monthly"),
    ("/find/quiet", "0.7", "monthly"),
    ("/find/time-limit", "0.7", "monthly"),
)


@dataclass(frozen=True)
class SitemapUrl:
    loc: str
    lastmod: Optional[str] = None
    changefreq: Optional[str] = None
    priority: Optional[str] = None


def format_date(value: Optional[str]) -> Optional[str]:
    """Format an ISO timestamp as a UTC YYYY-MM-DD date.

    Returns:
        The date, or None when value is empty or not an ISO timestamp.
    """
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date().isoformat()


def build_sitemap_urls(
    base_url: str,
    cafes: Sequence[dict],
    cities: Iterable[str],
    berlin_districts: Iterable[str],
) -> List[SitemapUrl]:
    """Collect every sitemap entry, one per locale for each page.

    Args:
        base_url: Public site URL without trailing slash
        cafes: Café rows with id/place_id and timestamps
        cities: City slugs
        berlin_districts: Berlin district slugs

    Returns:
        Entries in page order: static pages, cities, districts, cafés.
    """
    urls: List[SitemapUrl] = []

    for path, priority, changefreq in STATIC_PAGES:
        for locale in SUPPORTED_LOCALES:
            urls.append(
                SitemapUrl(
                    loc=f"{base_url}{with_locale(locale, path)}",
                    changefreq=changefreq,
                    priority=priority,
                )
            )

    for city in cities:
        for locale in SUPPORTED_LOCALES:
            urls.append(
                SitemapUrl(
                    loc=f"{base_url}/{locale.value}/cities/{quote(city, safe='')}",
                    changefreq="weekly",
                    priority="0.8",
                )
            )

    for district in berlin_districts:
        for locale in SUPPORTED_LOCALES:
            urls.append(
                SitemapUrl(
                    loc=f"{base_url}/{locale.value}/cities/berlin/{district}",
                    changefreq="weekly",
                    priority="0.75",
                )
            )

    for cafe in cafes:
        lastmod = format_date(cafe.get("updated_at")) or format_date(
            cafe.get("created_at")
        )
        for locale in SUPPORTED_LOCALES:
            urls.append(
                SitemapUrl(
                    loc=f"{base_url}{get_cafe_href(cafe, locale)}",
                    lastmod=lastmod,
                    changefreq="monthly",
                    priority="0.7",
                )
            )

    return urls


def render_sitemap(urls: Iterable[SitemapUrl]) -> str:
    """Serialize entries as a sitemaps.org urlset document."""
    urlset = ET.Element("urlset", xmlns=SITEMAP_NAMESPACE)
    for url in urls:
        node = ET.SubElement(urlset, "url")
        ET.SubElement(node, "loc").text = url.loc
        for name in ("lastmod", "changefreq", "priority"):
            value = getattr(url, name)
            if value:
                ET.SubElement(node, name).text = value

    ET.indent(urlset, space="  ")
    body = ET.tostring(urlset, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}'


class SitemapGenerator:
    """Builds the sitemap and keeps the last document for ttl_seconds.

    Attributes:
        base_url: Public site URL
        ttl_seconds: How long a generated document is reused
        cafe_limit: Maximum number of cafés queried
    """

    def __init__(
        self,
        base_url: str,
        ttl_seconds: int = 300,
        cafe_limit: int = 5000,
        major_cities: Sequence[str] = (),
        berlin_districts: Sequence[str] = (),
        clock: Callable[[], float] = time.monotonic,
    ):
        self.base_url = base_url.rstrip("/")
        self.ttl_seconds = ttl_seconds
        self.cafe_limit = cafe_limit
        self.major_cities = list(major_cities)
        self.berlin_districts = list(berlin_districts)
        self._clock = clock
        self._cached: Optional[str] = None
        self._generated_at = 0.0

    def get(self, repository: CafeRepository) -> str:
        """Return the cached document, regenerating it when stale.

        Never raises; returns EMPTY_SITEMAP when generation fails.
        """
        now = self._clock()
        if self._cached is not None and now - self._generated_at < self.ttl_seconds:
            return self._cached

        try:
            xml, complete = self._build(repository)
        except Exception as e:  # pylint: disable=broad-except
            logger.error("sitemap_generation_failed", error=str(e), exc_info=True)
            return EMPTY_SITEMAP

        # A document built without the café list is retried on the next request
        if complete:
            self._cached = xml
            self._generated_at = now
        return xml

    def generate(self, repository: CafeRepository) -> str:
        """Query cafés and render a fresh document.

        Database failures degrade to the static pages and the major city
        list.
        """
        xml, _ = self._build(repository)
        return xml

    def _build(self, repository: CafeRepository) -> Tuple[str, bool]:
        result = repository.list_for_sitemap(limit=self.cafe_limit)
        cafes: List[dict] = []
        if result.is_success:
            cafes = result.data or []
        else:
            logger.warning("sitemap_cafes_unavailable", error=result.message)

        city_slugs = sorted(
            {slugify_city(city) for city in count_cities(cafes)} - {""}
        )
        urls = build_sitemap_urls(
            self.base_url,
            cafes,
            city_slugs or self.major_cities,
            self.berlin_districts,
        )
        logger.info("sitemap_generated", url_count=len(urls), cafe_count=len(cafes))
        return render_sitemap(urls), result.is_success

    def clear(self) -> None:
        self._cached = None
        self._generated_at = 0.0
