"""Pydantic schemas for cafes package."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Cafe(BaseModel):
    """Café record as served by the API.

    Unknown database columns are kept.
    """

    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="Internal record identifier")
    place_id: Optional[str] = Field(None, description="Upstream place identifier")
    name: str = Field(..., description="Café name")
    description: Optional[str] = None
    ai_inference_notes: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    google_maps_url: Optional[str] = None
    google_rating: Optional[float] = None
    google_ratings_total: Optional[int] = None
    work_score: Optional[float] = None
    is_work_friendly: Optional[bool] = None
    ai_noise_level: Optional[str] = None
    ai_wifi_quality: Optional[str] = None
    ai_power_outlets: Optional[str] = None
    ai_laptop_policy: Optional[str] = None
    ai_score: Optional[float] = None
    website: Optional[str] = None
    phone: Optional[str] = None
    is_active: Optional[bool] = None
    is_verified: Optional[bool] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class Coordinates(BaseModel):
    lat: float
    lng: float


class NearbyCafe(BaseModel):
    """Café within the search radius."""

    id: str
    place_id: Optional[str] = None
    name: str
    city: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    distance: float = Field(..., description="Distance from the center in meters")
    work_score: Optional[float] = None
    google_rating: Optional[float] = None
    href: str = Field(..., description="Canonical detail path")


class NearbyResponse(BaseModel):
    """Response from nearby search."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "center": {"lat": 52.52, "lng": 13.405},
                "radius": 2000,
                "cafes": [
                    {
                        "id": "550e8400-e29b-41d4-a716-446655440000",
                        "place_id": "ChIJN1t_tDeuEmsRUsoyG83frY4",
                        "name": "Kaffee Mitte",
                        "city": "Berlin",
                        "lat": 52.521,
                        "lng": 13.401,
                        "distance": 312.4,
                        "work_score": 8.5,
                        "google_rating": 4.6,
                        "href": "/de/cafe/ChIJN1t_tDeuEmsRUsoyG83frY4",
                    }
                ],
            }
        }
    )

    center: Coordinates
    radius: int = Field(..., description="Search radius in meters")
    cafes: List[NearbyCafe]


class FeatureCafe(NearbyCafe):
    """Café within the search radius that offers the requested feature."""

    description: Optional[str] = None
    address: Optional[str] = None
    state: Optional[str] = None
    distance: int = Field(..., description="Distance from the center in whole meters")
    google_ratings_total: Optional[int] = None
    is_work_friendly: Optional[bool] = None
    ai_wifi_quality: Optional[str] = None
    ai_power_outlets: Optional[str] = None
    ai_noise_level: Optional[str] = None
    ai_laptop_policy: Optional[str] = None
    is_verified: Optional[bool] = None
    website: Optional[str] = None
    phone: Optional[str] = None
    created_at: Optional[str] = None


class FeatureNearbyResponse(BaseModel):
    """Response from feature search."""

    center: Coordinates
    radius: int = Field(..., description="Search radius in meters")
    feature: str
    cafes: List[FeatureCafe]
