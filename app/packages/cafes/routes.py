"""FastAPI routes for cafes package."""

from typing import Optional

import structlog
from fastapi import APIRouter, HTTPException, Query, Request, Response

from api.dependencies.rate_limits import get_limiter
from infrastructure.i18n import DEFAULT_LOCALE, Locale
from packages.cafes.dependencies import CafeRepositoryDep
from packages.cafes.features import CafeFeature
from packages.cafes.schemas import FeatureNearbyResponse, NearbyResponse
from packages.cafes.service import find_nearby, find_nearby_with_feature

logger = structlog.get_logger()
router = APIRouter(prefix="/cafes", tags=["cafes"])
limiter = get_limiter()

# Responses are keyed by the rounded center, so shared caches can reuse them
NEARBY_CACHE_CONTROL = "public, max-age=60, s-maxage=60, stale-while-revalidate=120"


@router.get(
    "/nearby",
    response_model=NearbyResponse,
    summary="Nearby Cafés",
    description="Active cafés within a radius of a point, nearest first",
)
@limiter.limit("60/minute")
def get_nearby(
    request: Request,  # pylint: disable=unused-argument
    response: Response,
    repository: CafeRepositoryDep,
    lat: float = Query(..., ge=-90, le=90, description="Latitude of the center"),
    lng: float = Query(..., ge=-180, le=180, description="Longitude of the center"),
    radius: Optional[str] = Query(
        None, description="Radius in meters (default 2000, max 10000)"
    ),
    locale: Locale = Query(DEFAULT_LOCALE, description="Locale for detail links"),
) -> NearbyResponse:
    """Find cafés near a coordinate.

    Raises:
        HTTPException: 502 when the database is unavailable
    """
    log = logger.bind(endpoint="/cafes/nearby")

    result = find_nearby(repository, lat, lng, radius=radius, locale=locale)
    if result.is_success:
        response.headers["Cache-Control"] = NEARBY_CACHE_CONTROL
        return result.data

    log.error("nearby_error", status=result.status.value, error=result.message)
    raise HTTPException(status_code=502, detail="Failed to fetch cafes")


@router.get(
    "/nearby-feature",
    response_model=FeatureNearbyResponse,
    summary="Nearby Cafés With a Feature",
    description="Active cafés near a point offering WiFi, outlets, quiet or no time limit",
)
@limiter.limit("60/minute")
def get_nearby_feature(
    request: Request,  # pylint: disable=unused-argument
    response: Response,
    repository: CafeRepositoryDep,
    lat: float = Query(..., ge=-90, le=90, description="Latitude of the center"),
    lng: float = Query(..., ge=-180, le=180, description="Longitude of the center"),
    feature: CafeFeature = Query(..., description="Feature the cafés must offer"),
    radius: Optional[str] = Query(
        None, description="Radius in meters (default 5000, max 20000)"
    ),
    limit: Optional[str] = Query(
        None, description="Maximum number of cafés (default 50, max 100)"
    ),
    locale: Locale = Query(DEFAULT_LOCALE, description="Locale for detail links"),
) -> FeatureNearbyResponse:
    """Find cafés near a coordinate that offer a feature.

    Raises:
        HTTPException: 502 when the database is unavailable
    """
    log = logger.bind(endpoint="/cafes/nearby-feature", feature=feature.value)

    result = find_nearby_with_feature(
        repository,
        lat,
        lng,
        feature,
        radius=radius,
        limit=limit,
        locale=locale,
    )
    if result.is_success:
        response.headers["Cache-Control"] = NEARBY_CACHE_CONTROL
        return result.data

    log.error("nearby_feature_error", status=result.status.value, error=result.message)
    raise HTTPException(status_code=502, detail="Failed to fetch cafes")
