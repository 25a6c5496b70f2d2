"""Cafes package - identifiers, ranking, validation and nearby search."""

from packages.cafes.ranking import rank_cities, visible_cafes
from packages.cafes.routing import (
    CafeIdKind,
    CafeRouteParam,
    DetailRouteQueryConfig,
    classify,
    get_cafe_href,
    get_cafe_identifier,
    get_detail_route_query_config,
    has_valid_cafe_link,
)
from packages.cafes.validation import (
    CafeValidationError,
    validate_cafe,
    validate_cafe_or_none,
)

__all__ = [
    "CafeIdKind",
    "CafeRouteParam",
    "DetailRouteQueryConfig",
    "classify",
    "get_cafe_href",
    "get_cafe_identifier",
    "get_detail_route_query_config",
    "has_valid_cafe_link",
    "rank_cities",
    "visible_cafes",
    "CafeValidationError",
    "validate_cafe",
    "validate_cafe_or_none",
]
