"""Great-circle distance and bounding boxes for nearby search."""

import math
import re
from typing import Any, Iterable, List, NamedTuple, Optional, Tuple

EARTH_RADIUS_M = 6371000
DEFAULT_RADIUS_M = 2000
MAX_RADIUS_M = 10000
MAX_NEARBY_RESULTS = 50
COORDINATE_PRECISION = 4
# Keeps the longitude span finite near the poles
MIN_COS_LAT = 0.1

_LEADING_INTEGER = re.compile(r"^\s*([+-]?\d+)")


class BoundingBox(NamedTuple):
    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float


def haversine_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Distance between two coordinates in meters."""
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lng / 2) ** 2
    )
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def bounding_box(lat: float, lng: float, radius: float) -> BoundingBox:
    """Approximate box around a point, clamped to valid coordinates."""
    angular_distance = radius / EARTH_RADIUS_M
    delta_lat = math.degrees(angular_distance)
    cos_lat = max(math.cos(math.radians(lat)), MIN_COS_LAT)
    delta_lng = math.degrees(angular_distance) / cos_lat

    return BoundingBox(
        min_lat=max(-90.0, lat - delta_lat),
        max_lat=min(90.0, lat + delta_lat),
        min_lng=max(-180.0, lng - delta_lng),
        max_lng=min(180.0, lng + delta_lng),
    )


def parse_int_prefix(value: Any) -> Optional[int]:
    """Read the leading integer of a query value.

    Examples:
        "1500.5" -> 1500
        "800m" -> 800
        "abc" -> None
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return int(value) if math.isfinite(value) else None
    if not isinstance(value, str):
        return None
    match = _LEADING_INTEGER.match(value)
    return int(match.group(1)) if match else None


def normalize_count(value: Any, default: int, maximum: int) -> int:
    """Default a missing, unparsable or non-positive count; clamp to maximum."""
    parsed = parse_int_prefix(value)
    if parsed is None or parsed <= 0:
        parsed = default
    return min(parsed, maximum)


def normalize_radius(
    radius: Any,
    default: int = DEFAULT_RADIUS_M,
    maximum: int = MAX_RADIUS_M,
) -> int:
    """Radius in meters from a query value, defaulted and clamped."""
    return normalize_count(radius, default, maximum)


def round_coordinate(value: float) -> float:
    return round(value, COORDINATE_PRECISION)


def nearest(
    lat: float,
    lng: float,
    radius: float,
    cafes: Iterable[dict],
    limit: int = MAX_NEARBY_RESULTS,
) -> List[Tuple[dict, float]]:
    """Filter cafés to the radius and sort them by distance.

    Returns:
        Up to limit (café, distance in meters) pairs, nearest first.
    """
    with_distance = []
    for cafe in cafes:
        distance = haversine_distance(
            lat, lng, cafe.get("latitude") or 0, cafe.get("longitude") or 0
        )
        if distance <= radius:
            with_distance.append((cafe, distance))

    with_distance.sort(key=lambda pair: pair[1])
    return with_distance[:limit]
