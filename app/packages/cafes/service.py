"""
Business logic for café lookups.

Functions take their repository as an argument and return OperationResults;
routes decide how results map to HTTP responses.
"""

from typing import Any

import structlog

from infrastructure.i18n import Locale
from infrastructure.operations import OperationResult
from packages.cafes import geo
from packages.cafes.features import (
    DEFAULT_FEATURE_LIMIT,
    DEFAULT_FEATURE_RADIUS_M,
    MAX_FEATURE_LIMIT,
    MAX_FEATURE_RADIUS_M,
    CafeFeature,
)
from packages.cafes.repository import CafeRepository
from packages.cafes.routing import get_cafe_href
from packages.cafes.schemas import (
    Coordinates,
    FeatureCafe,
    FeatureNearbyResponse,
    NearbyCafe,
    NearbyResponse,
)

logger = structlog.get_logger()


def find_nearby(
    repository: CafeRepository,
    lat: float,
    lng: float,
    radius: Any = None,
    locale: Locale = Locale.DE,
) -> OperationResult:
    """
    Find active cafés around a point.

    The center is rounded to 4 decimals (about 11 m) and the radius is
    defaulted and clamped before querying.

    Args:
        repository: Café repository
        lat: Latitude of the center
        lng: Longitude of the center
        radius: Requested radius in meters
        locale: Locale used for the detail links

    Returns:
        OperationResult with a NearbyResponse or the repository error
    """
    radius_m = geo.normalize_radius(radius)
    lat = geo.round_coordinate(lat)
    lng = geo.round_coordinate(lng)

    log = logger.bind(lat=lat, lng=lng, radius=radius_m, operation="find_nearby")

    result = repository.list_in_bounds(geo.bounding_box(lat, lng, radius_m))
    if not result.is_success:
        log.warning("nearby_lookup_failed", status=result.status.value)
        return result

    matches = geo.nearest(lat, lng, radius_m, result.data)
    log.info("nearby_cafes_found", candidates=len(result.data), matches=len(matches))

    response = NearbyResponse(
        center=Coordinates(lat=lat, lng=lng),
        radius=radius_m,
        cafes=[
            NearbyCafe(
                id=cafe["id"],
                place_id=cafe.get("place_id"),
                name=cafe["name"],
                city=cafe.get("city"),
                lat=cafe.get("latitude"),
                lng=cafe.get("longitude"),
                distance=distance,
                work_score=cafe.get("work_score"),
                google_rating=cafe.get("google_rating"),
                href=get_cafe_href(cafe, locale),
            )
            for cafe, distance in matches
        ],
    )
    return OperationResult.success(data=response)


def find_nearby_with_feature(
    repository: CafeRepository,
    lat: float,
    lng: float,
    feature: CafeFeature,
    radius: Any = None,
    limit: Any = None,
    locale: Locale = Locale.DE,
) -> OperationResult:
    """
    Find active cafés around a point that offer a work feature.

    Same rounding as find_nearby, with a wider default radius (5 km, at most
    20 km) and a caller-chosen result limit (50, at most 100).

    Returns:
        OperationResult with a FeatureNearbyResponse or the repository error
    """
    radius_m = geo.normalize_radius(
        radius,
        default=DEFAULT_FEATURE_RADIUS_M,
        maximum=MAX_FEATURE_RADIUS_M,
    )
    max_results = geo.normalize_count(
        limit, default=DEFAULT_FEATURE_LIMIT, maximum=MAX_FEATURE_LIMIT
    )
    lat = geo.round_coordinate(lat)
    lng = geo.round_coordinate(lng)

    log = logger.bind(
        lat=lat,
        lng=lng,
        radius=radius_m,
        feature=feature.value,
        operation="find_nearby_with_feature",
    )

    result = repository.list_with_feature_in_bounds(
        geo.bounding_box(lat, lng, radius_m), feature
    )
    if not result.is_success:
        log.warning("feature_lookup_failed", status=result.status.value)
        return result

    matches = geo.nearest(lat, lng, radius_m, result.data, limit=max_results)
    log.info("feature_cafes_found", candidates=len(result.data), matches=len(matches))

    response = FeatureNearbyResponse(
        center=Coordinates(lat=lat, lng=lng),
        radius=radius_m,
        feature=feature.value,
        cafes=[
            FeatureCafe(
                id=cafe["id"],
                place_id=cafe.get("place_id"),
                name=cafe["name"],
                description=cafe.get("description"),
                city=cafe.get("city"),
                state=cafe.get("state"),
                address=cafe.get("address"),
                lat=cafe.get("latitude"),
                lng=cafe.get("longitude"),
                distance=round(distance),
                work_score=(
                    cafe["work_score"]
                    if cafe.get("work_score") is not None
                    else cafe.get("ai_score")
                ),
                google_rating=cafe.get("google_rating"),
                google_ratings_total=cafe.get("google_ratings_total"),
                is_work_friendly=cafe.get("is_work_friendly"),
                ai_wifi_quality=cafe.get("ai_wifi_quality"),
                ai_power_outlets=cafe.get("ai_power_outlets"),
                ai_noise_level=cafe.get("ai_noise_level"),
                ai_laptop_policy=cafe.get("ai_laptop_policy"),
                is_verified=cafe.get("is_verified"),
                website=cafe.get("website"),
                phone=cafe.get("phone"),
                created_at=cafe.get("created_at"),
                href=get_cafe_href(cafe, locale),
            )
            for cafe, distance in matches
        ],
    )
    return OperationResult.success(data=response)
