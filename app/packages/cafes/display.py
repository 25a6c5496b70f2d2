"""Display helpers for café pages: addresses, descriptions, links."""

import re
from typing import Any, Mapping, Optional
from urllib.parse import quote, urlparse

GOOGLE_MAPS_SEARCH_URL = "https://www.google.com/maps/search/?api=1&query={lat},{lng}"
GOOGLE_MAPS_QUERY_URL = "https://www.google.com/maps?q={query}"

_EXTRACT_CITY_WITH_ZIP = re.compile(r",\s*\d{5,}\s+([^,]+?)(?:,|$)")
_EXTRACT_CITY = re.compile(r",\s*([A-Za-zÄÖÜäöü][^,]+?)(?:,|$)")


def _text(data: Mapping[str, Any], name: str) -> str:
    value = data.get(name)
    return value.strip() if isinstance(value, str) else ""


def format_address(data: Mapping[str, Any]) -> str:
    """Format an address line without repeating parts already present.

    zip_code, city, state and country are appended only when the address
    does not contain them yet. Without an address the line is built from
    those parts alone.

    Example:
        {"address": "Nagelsweg 19, 20459 Hamburg", "city": "Hamburg",
         "zip_code": "20459", "country": "Germany"}
        -> "Nagelsweg 19, 20459 Hamburg, Germany"
    """
    parts = [
        _text(data, "zip_code"),
        _text(data, "city"),
        _text(data, "state"),
        _text(data, "country"),
    ]
    address = _text(data, "address")

    if not address:
        return ", ".join(part for part in parts if part)

    lowered = address.lower()
    missing = [part for part in parts if part and part.lower() not in lowered]
    if missing:
        return f"{address}, {', '.join(missing)}"
    return address


def combine_description(
    description: Optional[str], ai_inference_notes: Optional[str]
) -> str:
    """Join the description and the inferred notes with a blank line."""
    parts = [(description or "").strip(), (ai_inference_notes or "").strip()]
    return "\n\n".join(part for part in parts if part)


def clean_domain(url: Optional[str]) -> str:
    """Strip protocol, www. prefix and one trailing slash.

    Example:
        "https://www.example.com/path/" -> "example.com/path"
    """
    if not url or not isinstance(url, str):
        return ""
    cleaned = re.sub(r"^https?://", "", url, flags=re.IGNORECASE)
    cleaned = re.sub(r"/$", "", cleaned)
    return re.sub(r"^www\.", "", cleaned, flags=re.IGNORECASE)


def strip_website_domain(url: Optional[str]) -> Optional[str]:
    """Get the bare host of a website URL, without www.

    Example:
        "https://www.example.com/path" -> "example.com"
    """
    if not url or not isinstance(url, str):
        return None
    candidate = url if url.startswith("http") else f"https://{url}"
    try:
        host = urlparse(candidate).hostname
    except ValueError:
        return None
    if not host:
        return None
    return re.sub(r"^www\.", "", host) or None


def get_maps_url(cafe: Mapping[str, Any]) -> str:
    """Get a Google Maps URL for a café.

    Uses the stored URL, else the coordinates, else an address search.
    """
    stored = _text(cafe, "google_maps_url")
    if stored:
        return stored

    lat, lng = cafe.get("latitude"), cafe.get("longitude")
    if lat is not None and lng is not None:
        return GOOGLE_MAPS_SEARCH_URL.format(lat=lat, lng=lng)

    query = ", ".join(
        _text(cafe, name)
        for name in ("name", "address", "city", "state", "zip_code")
        if _text(cafe, name)
    )
    return GOOGLE_MAPS_QUERY_URL.format(query=quote(query, safe=""))


def _city_from_address(address: str) -> Optional[str]:
    match = _EXTRACT_CITY_WITH_ZIP.search(address) or _EXTRACT_CITY.search(address)
    return match.group(1).strip() if match else None


def get_heading_city(cafe: Mapping[str, Any]) -> str:
    """City for headings: the record's, else parsed from the address, else "Germany"."""
    city = _text(cafe, "city") or None
    address = _text(cafe, "address")
    if not city and address:
        city = _city_from_address(address)
    return city or "Germany"


def is_valid_public_url(url: Optional[str]) -> bool:
    """Check that a URL is absolute http(s) and not pointing at localhost."""
    if not url or not isinstance(url, str):
        return False
    try:
        parsed = urlparse(url)
        host = parsed.hostname
    except ValueError:
        return False

    if parsed.scheme not in ("http", "https") or not host:
        return False
    return host != "localhost" and not host.startswith("127.")


def sanitize_url(url: Optional[str]) -> Optional[str]:
    """Return the trimmed URL when it is a valid public URL, else None."""
    if not url or not url.strip():
        return None
    trimmed = url.strip()
    return trimmed if is_valid_public_url(trimmed) else None


def format_work_score(work_score: Optional[float]) -> Optional[str]:
    """Show 0-100 scores as "72/100" and 0-10 scores as "7.2/10"."""
    if work_score is None:
        return None
    if work_score > 10:
        return f"{round(work_score)}/100"
    return f"{work_score:.1f}/10"
