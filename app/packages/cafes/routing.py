"""Café route parameters, detail-query config and canonical links.

Route parameters are classified once into a tagged variant. Everything that
needs to know whether a parameter is an upstream place id or an internal
record id branches on that variant instead of re-checking string shapes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from infrastructure.i18n import with_locale
from infrastructure.logging import get_module_logger

logger = get_module_logger()

# Place ids minted by the upstream places provider all start with this prefix
EXTERNAL_ID_PREFIX = "ChIJ"

FALLBACK_LISTING_PATH = "/cities"


class CafeIdKind(str, Enum):
    """Kinds of café route parameter."""

    EXTERNAL_ID = "external_id"
    INTERNAL_ID = "internal_id"
    INVALID = "invalid"


@dataclass(frozen=True)
class CafeRouteParam:
    """Classified café route parameter.

    Attributes:
        kind: Which identifier shape the parameter has.
        value: Trimmed parameter, None when invalid.
    """

    kind: CafeIdKind
    value: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.kind != CafeIdKind.INVALID


INVALID_PARAM = CafeRouteParam(kind=CafeIdKind.INVALID)


def classify(param: Any) -> CafeRouteParam:
    """Classify a raw route parameter by its shape.

    Args:
        param: Raw route value. Any type is accepted.

    Returns:
        CafeRouteParam; INVALID for non-strings and blank strings.
    """
    if not isinstance(param, str):
        return INVALID_PARAM

    trimmed = param.strip()
    if not trimmed:
        return INVALID_PARAM

    if trimmed.startswith(EXTERNAL_ID_PREFIX):
        return CafeRouteParam(kind=CafeIdKind.EXTERNAL_ID, value=trimmed)
    return CafeRouteParam(kind=CafeIdKind.INTERNAL_ID, value=trimmed)


@dataclass(frozen=True)
class DetailRouteQueryConfig:
    """Which column a detail lookup filters on, and with which value."""

    param: str
    queried_column: str
    is_place_id: bool


def get_detail_route_query_config(param: Any) -> Optional[DetailRouteQueryConfig]:
    """Derive the detail lookup config for a route parameter.

    Examples:
        "ChIJN1t_tDeuEmsRUsoyG83frY4" -> queried_column "place_id"
        "550e8400-e29b-41d4-a716-446655440000" -> queried_column "id"
        "" or 123 -> None
    """
    route_param = param if isinstance(param, CafeRouteParam) else classify(param)
    if not route_param.is_valid:
        return None

    is_place_id = route_param.kind == CafeIdKind.EXTERNAL_ID
    return DetailRouteQueryConfig(
        param=route_param.value,
        queried_column="place_id" if is_place_id else "id",
        is_place_id=is_place_id,
    )


def _field(record: Any, name: str) -> Any:
    if record is None:
        return None
    if isinstance(record, dict):
        return record.get(name)
    getter = getattr(record, "get", None)
    if callable(getter):
        try:
            return getter(name)
        except (TypeError, KeyError):
            return None
    return getattr(record, name, None)


def _usable(identifier: Any) -> Optional[str]:
    if isinstance(identifier, str) and identifier.strip():
        return identifier.strip()
    return None


def get_cafe_identifier(record: Any) -> Optional[str]:
    """Get the identifier used in café URLs.

    Prefers place_id, falls back to id. Blank and non-string values are
    skipped. The result is trimmed.

    Args:
        record: Mapping or object with place_id and/or id.

    Returns:
        Identifier string, or None if neither is usable.
    """
    return _usable(_field(record, "place_id")) or _usable(_field(record, "id"))


def has_valid_cafe_link(record: Any) -> bool:
    """Return True when get_cafe_href would link to a detail page."""
    return get_cafe_identifier(record) is not None


def get_cafe_href(record: Any, locale: Any = None) -> str:
    """Get the canonical href for a café detail page.

    Never raises; falls back to the city listing when the record has no
    usable identifier.

    Args:
        record: Mapping or object with place_id and/or id.
        locale: Optional locale to prefix the path with.

    Returns:
        "/cafe/<identifier>" or "/cities", locale-prefixed when requested.
    """
    identifier = get_cafe_identifier(record)
    if identifier:
        path = f"/cafe/{identifier}"
    else:
        logger.debug(
            "cafe_missing_identifier",
            place_id=_field(record, "place_id"),
            id=_field(record, "id"),
        )
        path = FALLBACK_LISTING_PATH

    if locale is None:
        return path
    return with_locale(locale, path)
