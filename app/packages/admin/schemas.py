"""Pydantic schemas for admin package."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class AdminUser(BaseModel):
    """Authenticated admin, taken from the verified token claims."""

    id: str
    email: Optional[str] = None


class DecisionRequest(BaseModel):
    """Review decision for a pending submission."""

    decision: Literal["approve", "reject"]
    review_notes: Optional[str] = None


class DecisionResponse(BaseModel):
    ok: bool = True
    submission_id: str
    status: str
    cafe_id: Optional[str] = None


class SubmissionList(BaseModel):
    submissions: List[Dict[str, Any]]
    count: int


class CafeFields(BaseModel):
    """Writable café columns; anything else in the body is dropped."""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    name: Optional[str] = None
    description: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    place_id: Optional[str] = None
    google_maps_url: Optional[str] = None
    google_rating: Optional[float] = None
    google_ratings_total: Optional[int] = None
    price_level: Optional[int] = None
    business_status: Optional[str] = None
    hours: Optional[Any] = None
    work_score: Optional[float] = None
    is_work_friendly: Optional[bool] = None
    ai_wifi_quality: Optional[str] = None
    ai_power_outlets: Optional[str] = None
    ai_noise_level: Optional[str] = None
    is_active: Optional[bool] = None
    is_verified: Optional[bool] = None


class CafeCreate(CafeFields):
    """New café; name, address and city are checked by the service."""


class CafeUpdate(CafeFields):
    """Partial café update; only fields present in the body are written."""


class CafeResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    ok: bool = True
    cafe: Dict[str, Any] = Field(default_factory=dict)
