"""Pydantic schemas for submissions package."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from infrastructure.i18n import Locale


class SubmissionCreate(BaseModel):
    """Café suggestion sent from the public form."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field("", description="Café name")
    city: str = Field("", description="City")
    address: str = Field("", description="Street address")
    website: Optional[str] = Field(None, description="Public website URL")
    google_maps_url: Optional[str] = Field(None, description="Google Maps link")
    submitter_email: Optional[str] = Field(None, description="Contact email")
    email_consent: bool = Field(
        False, description="Whether the submitter agreed to be notified"
    )
    locale: Optional[str] = Field(None, description="Locale of the form")
    notes: Optional[str] = None
    wifi_notes: Optional[str] = None
    power_notes: Optional[str] = None
    noise_notes: Optional[str] = None
    time_limit_notes: Optional[str] = None


class SubmissionResponse(BaseModel):
    """Response after a submission was stored."""

    ok: bool = True
    request_id: str


class ConsentContext(BaseModel):
    """Request details recorded with an email consent."""

    locale: Locale
    ip: str = "unknown"
    user_agent: str = "unknown"
