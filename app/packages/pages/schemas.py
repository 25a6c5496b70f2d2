"""Pydantic schemas for localized page payloads."""

from typing import List, Optional

from pydantic import BaseModel, Field

from packages.cafes.schemas import Cafe
from packages.seo.metadata import PageMetadata


class CafeCard(BaseModel):
    """Café as listed on home and city pages."""

    id: str
    name: str
    city: Optional[str] = None
    address: str = ""
    href: str = Field(..., description="Locale-prefixed detail path")
    has_link: bool = Field(..., description="False when the café has no usable id")
    work_score: Optional[float] = None
    google_rating: Optional[float] = None
    google_ratings_total: Optional[int] = None


class PageLink(BaseModel):
    href: str
    label: str


class CityCount(BaseModel):
    name: str
    slug: str
    href: str
    cafe_count: int


class HomePage(BaseModel):
    locale: str
    metadata: PageMetadata
    hero_title: str
    hero_subtitle: str
    top_cities: List[CityCount]
    top_rated: List[CafeCard]
    recently_added: List[CafeCard]


class CityPage(BaseModel):
    locale: str
    metadata: PageMetadata
    city_slug: str
    city_name: str
    expanded: bool
    total_count: int
    summary: str = Field(..., description="How many cafés are shown")
    toggle_label: Optional[str] = Field(
        None, description="Label of the show all / top 10 toggle"
    )
    cafes: List[CafeCard]
    district_links: List[PageLink] = Field(
        default_factory=list, description="Berlin district pages, on the Berlin page only"
    )
    related_links: List[PageLink] = Field(default_factory=list)


class CafePage(BaseModel):
    locale: str
    metadata: PageMetadata
    heading: str
    cafe: Cafe
    href: str
    address: str
    about: str = Field("", description="Description joined with inferred notes")
    maps_url: str
    website_domain: Optional[str] = None
    work_score: Optional[str] = None


class CitiesPage(BaseModel):
    locale: str
    metadata: PageMetadata
    heading: str
    subtitle: str
    major_cities_label: str
    all_cities_label: str
    major_cities: List[CityCount]
    other_cities: List[CityCount] = Field(
        ..., description="Cities outside the major list, most cafés first"
    )
    empty_message: Optional[str] = Field(None, description="Shown when no city has cafés")
    submit_link: PageLink


class DistrictPage(BaseModel):
    locale: str
    metadata: PageMetadata
    city_slug: str
    city_name: str
    district_slug: str
    district_name: str
    heading: str
    intro: Optional[str] = None
    total_count: int
    summary: str
    cafes: List[CafeCard]
    district_links: List[PageLink] = Field(
        ..., description="The Berlin page followed by the other districts"
    )
    related_links: List[PageLink]


class FeaturePage(BaseModel):
    locale: str
    metadata: PageMetadata
    feature: str
    heading: str
    intro: str
    search_endpoint: str = Field(
        ..., description="Nearby search filtered by this feature, without coordinates"
    )
    default_radius: int
    related_links: List[PageLink]


class SubmitPage(BaseModel):
    locale: str
    metadata: PageMetadata
    heading: str
    intro: str
    submit_endpoint: str
    required_fields: List[str]
    optional_fields: List[str]
    consent_label: str
