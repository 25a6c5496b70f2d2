"""robots.txt generation."""

ROBOTS_TEMPLATE = """User-agent: *
Allow: /

# Authenticated admin area
Disallow: /admin

# JSON API
Disallow: /api

Sitemap: {base_url}/sitemap.xml
"""


def render_robots(base_url: str) -> str:
    return ROBOTS_TEMPLATE.format(base_url=base_url.rstrip("/"))
