"""
Builders for the localized page payloads.

Every builder takes the translator and the locale of the request, plus the
café repository for pages that list cafés, and returns an OperationResult.
Copy comes from the locale's translation table; keys missing there are
served from the fallback table.
"""

from typing import Any, Dict, Iterable, List, Mapping

import structlog

from infrastructure.i18n import Dictionary, Locale, Translator, with_locale
from infrastructure.operations import OperationResult
from packages.cafes.cities import (
    MAJOR_CITY_SLUGS,
    city_slug_aliases,
    count_cities,
    count_for_city,
    get_city_db_name,
    get_city_display_name,
    slugify_city,
)
from packages.cafes.display import (
    combine_description,
    format_address,
    format_work_score,
    get_heading_city,
    get_maps_url,
    sanitize_url,
    strip_website_domain,
)
from packages.cafes.districts import (
    BERLIN,
    BERLIN_DISTRICTS,
    BERLIN_SLUG,
    DISTRICT_INTRO_KEYS,
    district_path,
    filter_by_district,
    get_district_name,
)
from packages.cafes.features import (
    DEFAULT_FEATURE_RADIUS_M,
    FEATURE_COPY,
    CafeFeature,
    feature_path,
)
from packages.cafes.ranking import (
    COLLAPSED_LIMIT,
    rank_by_work_score,
    rank_cities,
    visible_cafes,
)
from packages.cafes.repository import CafeRepository
from packages.cafes.routing import get_cafe_href, get_cafe_identifier, has_valid_cafe_link
from packages.pages.schemas import (
    CafeCard,
    CafePage,
    CitiesPage,
    CityCount,
    CityPage,
    DistrictPage,
    FeaturePage,
    HomePage,
    PageLink,
    SubmitPage,
)
from packages.seo.metadata import (
    DESCRIPTION_MAX_LENGTH,
    build_page_metadata,
    make_page_metadata,
)
from packages.submissions.service import OPTIONAL_FIELDS, REQUIRED_FIELDS

logger = structlog.get_logger()

TOP_CITIES_LIMIT = 10
HOME_LIST_LIMIT = 6
SHORT_DESCRIPTION_LENGTH = 40
PREFIX_DESCRIPTION_BELOW = 120
DEFAULT_CITY = "Germany"

NEARBY_FEATURE_ENDPOINT = "/api/v1/cafes/nearby-feature"
SUBMISSIONS_ENDPOINT = "/api/v1/submissions"
CITY_RELATED_FEATURES = (CafeFeature.WIFI, CafeFeature.OUTLETS, CafeFeature.QUIET)


def to_card(cafe: Mapping[str, Any], locale: Locale) -> CafeCard:
    """Reduce a café record to what list pages show."""
    return CafeCard(
        id=cafe["id"],
        name=cafe["name"],
        city=cafe.get("city"),
        address=format_address(cafe),
        href=get_cafe_href(cafe, locale),
        has_link=has_valid_cafe_link(cafe),
        work_score=cafe.get("work_score"),
        google_rating=cafe.get("google_rating"),
        google_ratings_total=cafe.get("google_ratings_total"),
    )


def to_city_count(city_slug: str, count: int, locale: Locale) -> CityCount:
    return CityCount(
        name=get_city_display_name(city_slug, locale),
        slug=city_slug,
        href=with_locale(locale, f"/cities/{city_slug}"),
        cafe_count=count,
    )


def feature_links(
    translator: Translator,
    dictionary: Dictionary,
    locale: Locale,
    features: Iterable[CafeFeature] = CITY_RELATED_FEATURES,
) -> List[PageLink]:
    """Links to feature landing pages, labelled in the page's language."""
    return [
        PageLink(
            href=with_locale(locale, feature_path(feature)),
            label=translator.t(dictionary, FEATURE_COPY[feature].link_label),
        )
        for feature in features
    ]


def berlin_district_links(locale: Locale, exclude: str = "") -> List[PageLink]:
    return [
        PageLink(href=with_locale(locale, district_path(slug)), label=name)
        for slug, name in BERLIN_DISTRICTS.items()
        if slug != exclude
    ]


def build_cafe_description(
    translator: Translator, dictionary: Dictionary, cafe: Mapping[str, Any]
) -> str:
    """Build the meta description of a café page from its attributes.

    Parts are the work score (or else the rating), WiFi, outlets, noise level
    and location, joined with ". ". A short result is prefixed with the start
    of the café's own description; a long one is cut to 160 characters.
    Without any parts a generic "discover" sentence is used.
    """
    parts = []
    if cafe.get("work_score") is not None:
        parts.append(
            translator.render(
                dictionary,
                "meta.cafe.descWorkScore",
                {"value": format_work_score(cafe["work_score"])},
            )
        )
    elif cafe.get("google_rating") is not None:
        parts.append(
            translator.render(
                dictionary,
                "meta.cafe.descRating",
                {"value": f"{cafe['google_rating']:.1f}"},
            )
        )

    for field, key in (
        ("ai_wifi_quality", "meta.cafe.descWifi"),
        ("ai_power_outlets", "meta.cafe.descOutlets"),
        ("ai_noise_level", "meta.cafe.descAtmosphere"),
    ):
        if cafe.get(field):
            parts.append(translator.render(dictionary, key, {"value": cafe[field]}))

    city_state = ", ".join(value for value in (cafe.get("city"), cafe.get("state")) if value)
    if city_state:
        parts.append(
            translator.render(dictionary, "meta.cafe.descLocated", {"value": city_state})
        )

    description = ". ".join(parts)
    if cafe.get("description") and len(description) < PREFIX_DESCRIPTION_BELOW:
        description = f"{cafe['description'][:SHORT_DESCRIPTION_LENGTH]}. {description}"
    if len(description) > DESCRIPTION_MAX_LENGTH:
        description = description[: DESCRIPTION_MAX_LENGTH - 3] + "..."

    return description or translator.render(
        dictionary,
        "meta.cafe.descDiscover",
        {"name": cafe.get("name") or "", "city": cafe.get("city") or DEFAULT_CITY},
    )


def build_cafe_heading(
    translator: Translator, dictionary: Dictionary, cafe: Mapping[str, Any]
) -> str:
    """Localized "{name} — {label} in {city}" heading."""
    label_key = (
        "meta.cafe.titleWorkFriendly"
        if cafe.get("is_work_friendly") is True
        else "meta.cafe.titleCoworking"
    )
    label = translator.t(dictionary, label_key)
    city = get_heading_city(cafe)
    return f"{cafe['name']} — {label} in {city}"


def build_home_page(
    translator: Translator,
    repository: CafeRepository,
    locale: Locale,
    base_url: str,
) -> OperationResult:
    """Home page: top cities by café count, top rated and recent cafés."""
    log = logger.bind(page="home", locale=locale.value)
    dictionary = translator.get_dictionary(locale)

    cities = repository.list_cities()
    if not cities.is_success:
        log.warning("home_cities_failed", status=cities.status.value)
        return cities
    top_rated = repository.list_top_rated(limit=HOME_LIST_LIMIT)
    if not top_rated.is_success:
        log.warning("home_top_rated_failed", status=top_rated.status.value)
        return top_rated
    recent = repository.list_recent(limit=HOME_LIST_LIMIT)
    if not recent.is_success:
        log.warning("home_recent_failed", status=recent.status.value)
        return recent

    top_cities = [
        to_city_count(slugify_city(name), count, locale)
        for name, count in rank_cities(count_cities(cities.data), limit=TOP_CITIES_LIMIT)
    ]

    page = HomePage(
        locale=locale.value,
        metadata=build_page_metadata(
            translator, dictionary, base_url, "/", "meta.home.title", "meta.home.description"
        ),
        hero_title=translator.t(dictionary, "home.hero.title"),
        hero_subtitle=translator.t(dictionary, "home.hero.subtitle"),
        top_cities=top_cities,
        top_rated=[to_card(cafe, locale) for cafe in top_rated.data],
        recently_added=[to_card(cafe, locale) for cafe in recent.data],
    )
    return OperationResult.success(data=page)


def build_city_page(
    translator: Translator,
    repository: CafeRepository,
    locale: Locale,
    city_slug: str,
    base_url: str,
    expanded: bool = False,
) -> OperationResult:
    """City page: the top 10 cafés, or every café when expanded.

    Args:
        translator: Translator with all tables loaded
        repository: Café repository
        locale: Locale of the request
        city_slug: City slug from the URL
        base_url: Public site URL
        expanded: Whether the full list was requested

    Returns:
        OperationResult with a CityPage or the repository error
    """
    city_slug = city_slug.lower()
    log = logger.bind(page="city", locale=locale.value, city=city_slug)
    dictionary = translator.get_dictionary(locale)
    city_name = get_city_display_name(city_slug, locale)

    result = repository.list_by_city(get_city_db_name(city_slug))
    if not result.is_success:
        log.warning("city_cafes_failed", status=result.status.value)
        return result

    total = len(result.data)
    shown = visible_cafes(result.data, expanded=expanded)

    if total == 0:
        summary = translator.render(dictionary, "city.noCafes", {"city": city_name})
    elif expanded or total <= COLLAPSED_LIMIT:
        summary = translator.render(dictionary, "city.showingAll", {"total": total})
    else:
        summary = translator.render(
            dictionary, "city.showingCount", {"count": len(shown), "total": total}
        )

    toggle_label = None
    if total > COLLAPSED_LIMIT:
        toggle_label = (
            translator.t(dictionary, "city.showTop10")
            if expanded
            else translator.render(dictionary, "city.showAll", {"city": city_name})
        )

    page = CityPage(
        locale=locale.value,
        metadata=build_page_metadata(
            translator,
            dictionary,
            base_url,
            f"/cities/{city_slug}",
            "meta.city.title",
            "meta.city.description",
            {"city": city_name},
        ),
        city_slug=city_slug,
        city_name=city_name,
        expanded=expanded,
        total_count=total,
        summary=summary,
        toggle_label=toggle_label,
        cafes=[to_card(cafe, locale) for cafe in shown],
        district_links=berlin_district_links(locale) if city_slug == BERLIN_SLUG else [],
        related_links=feature_links(translator, dictionary, locale),
    )
    log.info("city_page_built", total=total, shown=len(shown))
    return OperationResult.success(data=page)


def build_cafe_page(
    translator: Translator,
    repository: CafeRepository,
    locale: Locale,
    param: str,
    base_url: str,
) -> OperationResult:
    """Café detail page for a place id or record id.

    Returns:
        OperationResult with a CafePage; PERMANENT_ERROR for a malformed
        parameter and NOT_FOUND for an unknown or inactive café.
    """
    dictionary = translator.get_dictionary(locale)

    result = repository.get_by_route_param(param)
    if not result.is_success:
        return result

    cafe: Dict[str, Any] = result.data
    site_name = translator.t(dictionary, "meta.siteName")
    heading = build_cafe_heading(translator, dictionary, cafe)
    identifier = get_cafe_identifier(cafe) or param.strip()

    page = CafePage(
        locale=locale.value,
        metadata=make_page_metadata(
            locale=locale,
            site_name=site_name,
            base_url=base_url,
            path=f"/cafe/{identifier}",
            title=f"{heading} | {site_name}",
            description=build_cafe_description(translator, dictionary, cafe),
        ),
        heading=heading,
        cafe=cafe,
        href=get_cafe_href(cafe, locale),
        address=format_address(cafe),
        about=combine_description(cafe.get("description"), cafe.get("ai_inference_notes")),
        maps_url=get_maps_url(cafe),
        website_domain=strip_website_domain(sanitize_url(cafe.get("website"))),
        work_score=format_work_score(cafe.get("work_score")),
    )
    return OperationResult.success(data=page)


def build_cities_page(
    translator: Translator,
    repository: CafeRepository,
    locale: Locale,
    base_url: str,
) -> OperationResult:
    """Cities index: the major cities first, then every other city by café count."""
    log = logger.bind(page="cities", locale=locale.value)
    dictionary = translator.get_dictionary(locale)

    cities = repository.list_cities()
    if not cities.is_success:
        log.warning("cities_failed", status=cities.status.value)
        return cities

    counts = count_cities(cities.data)
    major_aliases = set()
    for slug in MAJOR_CITY_SLUGS:
        major_aliases |= city_slug_aliases(slug)
    others = {
        name: count
        for name, count in counts.items()
        if slugify_city(name) and slugify_city(name) not in major_aliases
    }

    page = CitiesPage(
        locale=locale.value,
        metadata=build_page_metadata(
            translator,
            dictionary,
            base_url,
            "/cities",
            "meta.cities.title",
            "meta.cities.description",
        ),
        heading=translator.t(dictionary, "cities.browseByCity"),
        subtitle=translator.t(dictionary, "cities.findInCities"),
        major_cities_label=translator.t(dictionary, "cities.majorCities"),
        all_cities_label=translator.t(dictionary, "cities.allCities"),
        major_cities=[
            to_city_count(slug, count_for_city(counts, slug), locale)
            for slug in MAJOR_CITY_SLUGS
        ],
        other_cities=[
            to_city_count(slugify_city(name), count, locale)
            for name, count in rank_cities(others, limit=len(others))
        ],
        empty_message=None if counts else translator.t(dictionary, "cities.emptyState"),
        submit_link=PageLink(
            href=with_locale(locale, "/submit"),
            label=translator.t(dictionary, "common.submitCafe"),
        ),
    )
    return OperationResult.success(data=page)


def build_district_page(
    translator: Translator,
    repository: CafeRepository,
    locale: Locale,
    district_slug: str,
    base_url: str,
) -> OperationResult:
    """Berlin district page: the city's cafés whose address is in the district.

    Returns:
        OperationResult with a DistrictPage; NOT_FOUND for an unknown district.
    """
    district_slug = district_slug.lower()
    log = logger.bind(page="district", locale=locale.value, district=district_slug)
    district_name = get_district_name(district_slug)
    if district_name is None:
        return OperationResult.not_found(message=f"Unknown district: {district_slug}")

    dictionary = translator.get_dictionary(locale)
    result = repository.list_by_city(BERLIN)
    if not result.is_success:
        log.warning("district_cafes_failed", status=result.status.value)
        return result

    cafes = rank_by_work_score(filter_by_district(result.data, district_slug))
    variables = {"district": district_name, "city": BERLIN}
    if cafes:
        summary = translator.render(dictionary, "city.showingAll", {"total": len(cafes)})
    else:
        summary = translator.render(
            dictionary, "city.noCafes", {"city": f"{BERLIN} {district_name}"}
        )

    page = DistrictPage(
        locale=locale.value,
        metadata=build_page_metadata(
            translator,
            dictionary,
            base_url,
            district_path(district_slug),
            "meta.district.title",
            "meta.district.description",
            variables,
        ),
        city_slug=BERLIN_SLUG,
        city_name=BERLIN,
        district_slug=district_slug,
        district_name=district_name,
        heading=translator.render(dictionary, "district.heading", variables),
        intro=translator.t(
            dictionary, f"meta.district.intro.{DISTRICT_INTRO_KEYS[district_slug]}"
        ),
        total_count=len(cafes),
        summary=summary,
        cafes=[to_card(cafe, locale) for cafe in cafes],
        district_links=[
            PageLink(href=with_locale(locale, f"/cities/{BERLIN_SLUG}"), label=BERLIN)
        ]
        + berlin_district_links(locale, exclude=district_slug),
        related_links=feature_links(translator, dictionary, locale),
    )
    log.info("district_page_built", total=len(cafes))
    return OperationResult.success(data=page)


def build_feature_page(
    translator: Translator,
    locale: Locale,
    feature: CafeFeature,
    base_url: str,
) -> OperationResult:
    """Landing page of a work feature; cafés are loaded by the client nearby search."""
    dictionary = translator.get_dictionary(locale)
    copy = FEATURE_COPY[feature]

    page = FeaturePage(
        locale=locale.value,
        metadata=build_page_metadata(
            translator,
            dictionary,
            base_url,
            feature_path(feature),
            copy.title,
            copy.description,
        ),
        feature=feature.value,
        heading=translator.t(dictionary, copy.heading),
        intro=translator.t(dictionary, copy.intro),
        search_endpoint=f"{NEARBY_FEATURE_ENDPOINT}?feature={feature.value}",
        default_radius=DEFAULT_FEATURE_RADIUS_M,
        related_links=feature_links(
            translator,
            dictionary,
            locale,
            [other for other in CafeFeature if other != feature],
        ),
    )
    return OperationResult.success(data=page)


def build_submit_page(translator: Translator, locale: Locale, base_url: str) -> OperationResult:
    dictionary = translator.get_dictionary(locale)

    page = SubmitPage(
        locale=locale.value,
        metadata=build_page_metadata(
            translator,
            dictionary,
            base_url,
            "/submit",
            "meta.submit.title",
            "meta.submit.description",
        ),
        heading=translator.t(dictionary, "submit.heading"),
        intro=translator.t(dictionary, "submit.intro"),
        submit_endpoint=SUBMISSIONS_ENDPOINT,
        required_fields=[name for name, _ in REQUIRED_FIELDS],
        optional_fields=list(OPTIONAL_FIELDS),
        consent_label=translator.t(dictionary, "submit.consentLabel"),
    )
    return OperationResult.success(data=page)
