"""FastAPI routes for localized pages.

Paths carry the locale as first segment. Requests without one are redirected
by the locale middleware before they reach these routes.
"""

import structlog
from fastapi import APIRouter, HTTPException, Query

from infrastructure.i18n import Locale, Translator
from infrastructure.operations import OperationResult, OperationStatus
from infrastructure.services import SettingsDep, TranslatorDep
from packages.cafes.dependencies import CafeRepositoryDep
from packages.cafes.features import parse_feature
from packages.pages.schemas import (
    CafePage,
    CitiesPage,
    CityPage,
    DistrictPage,
    FeaturePage,
    HomePage,
    SubmitPage,
)
from packages.pages.service import (
    build_cafe_page,
    build_cities_page,
    build_city_page,
    build_district_page,
    build_feature_page,
    build_home_page,
    build_submit_page,
)

logger = structlog.get_logger()
router = APIRouter(tags=["pages"])

MISSING_CAFE_STATUSES = {OperationStatus.NOT_FOUND, OperationStatus.PERMANENT_ERROR}


def raise_unavailable(result: OperationResult, page: str) -> None:
    logger.error(
        "page_data_unavailable",
        page=page,
        status=result.status.value,
        error=result.message,
    )
    raise HTTPException(status_code=502, detail="Failed to load page data")


def raise_not_found(translator: Translator, locale: Locale, key: str) -> None:
    dictionary = translator.get_dictionary(locale)
    raise HTTPException(status_code=404, detail=translator.t(dictionary, key))


@router.get("/{locale}", response_model=HomePage, summary="Home Page")
def get_home_page(
    locale: Locale,
    translator: TranslatorDep,
    repository: CafeRepositoryDep,
    settings: SettingsDep,
) -> HomePage:
    result = build_home_page(translator, repository, locale, settings.server.SITE_URL)
    if not result.is_success:
        raise_unavailable(result, "home")
    return result.data


@router.get("/{locale}/cities", response_model=CitiesPage, summary="Cities Index")
def get_cities_page(
    locale: Locale,
    translator: TranslatorDep,
    repository: CafeRepositoryDep,
    settings: SettingsDep,
) -> CitiesPage:
    result = build_cities_page(translator, repository, locale, settings.server.SITE_URL)
    if not result.is_success:
        raise_unavailable(result, "cities")
    return result.data


@router.get("/{locale}/submit", response_model=SubmitPage, summary="Submit Page")
def get_submit_page(
    locale: Locale,
    translator: TranslatorDep,
    settings: SettingsDep,
) -> SubmitPage:
    return build_submit_page(translator, locale, settings.server.SITE_URL).data


@router.get("/{locale}/find/{feature}", response_model=FeaturePage, summary="Feature Page")
def get_feature_page(
    locale: Locale,
    feature: str,
    translator: TranslatorDep,
    settings: SettingsDep,
) -> FeaturePage:
    """Landing page of a work feature.

    Raises:
        HTTPException: 404 for features without a page
    """
    parsed = parse_feature(feature)
    if parsed is None:
        raise_not_found(translator, locale, "find.notFound")
    return build_feature_page(translator, locale, parsed, settings.server.SITE_URL).data


@router.get(
    "/{locale}/cities/berlin/{district}",
    response_model=DistrictPage,
    summary="Berlin District Page",
)
def get_district_page(
    locale: Locale,
    district: str,
    translator: TranslatorDep,
    repository: CafeRepositoryDep,
    settings: SettingsDep,
) -> DistrictPage:
    """Berlin district page.

    Raises:
        HTTPException: 404 for unknown districts,
            502 when the database is unavailable
    """
    result = build_district_page(
        translator, repository, locale, district, settings.server.SITE_URL
    )
    if result.status == OperationStatus.NOT_FOUND:
        raise_not_found(translator, locale, "district.notFound")
    if not result.is_success:
        raise_unavailable(result, "district")
    return result.data


@router.get("/{locale}/cities/{city}", response_model=CityPage, summary="City Page")
def get_city_page(
    locale: Locale,
    city: str,
    translator: TranslatorDep,
    repository: CafeRepositoryDep,
    settings: SettingsDep,
    expanded: bool = Query(False, description="Show every café instead of the top 10"),
) -> CityPage:
    result = build_city_page(
        translator,
        repository,
        locale,
        city,
        settings.server.SITE_URL,
        expanded=expanded,
    )
    if not result.is_success:
        raise_unavailable(result, "city")
    return result.data


@router.get("/{locale}/cafe/{param}", response_model=CafePage, summary="Café Page")
def get_cafe_page(
    locale: Locale,
    param: str,
    translator: TranslatorDep,
    repository: CafeRepositoryDep,
    settings: SettingsDep,
) -> CafePage:
    """Café detail page by place id or record id.

    Raises:
        HTTPException: 404 for malformed, unknown or inactive cafés,
            502 when the database is unavailable
    """
    result = build_cafe_page(
        translator, repository, locale, param, settings.server.SITE_URL
    )
    if result.status in MISSING_CAFE_STATUSES:
        raise_not_found(translator, locale, "meta.cafe.notFoundDescription")
    if not result.is_success:
        raise_unavailable(result, "cafe")
    return result.data
