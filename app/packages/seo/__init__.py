"""SEO package - sitemap, robots.txt and page metadata."""
