"""Café data access over PostgREST.

Repositories translate domain lookups into PostgREST queries and normalize
rows on the way out. Results are OperationResults, as from the client.
"""

from typing import Any, Dict, List, Optional

from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult
from integrations.supabase import ACTIVE_FILTER, SupabaseClient, eq
from packages.cafes.features import CafeFeature, feature_filters
from packages.cafes.geo import BoundingBox
from packages.cafes.routing import get_detail_route_query_config
from packages.cafes.validation import validate_cafe_or_none

logger = get_module_logger()

CAFES_TABLE = "cafes"
NEARBY_LIMIT = 500


class CafeRepository:
    """Queries against the cafes table."""

    def __init__(self, client: SupabaseClient):
        self.client = client

    def _validated(self, rows: Any) -> List[Dict[str, Any]]:
        if not isinstance(rows, list):
            return []
        valid = []
        for row in rows:
            cafe = validate_cafe_or_none(row)
            if cafe is None:
                logger.warning(
                    "dropped_invalid_cafe_row",
                    row_id=row.get("id") if isinstance(row, dict) else None,
                )
                continue
            valid.append(cafe)
        return valid

    def _list(self, **query: Any) -> OperationResult:
        result = self.client.select(CAFES_TABLE, **query)
        if not result.is_success:
            return result
        return OperationResult.success(data=self._validated(result.data))

    def get_by_route_param(self, param: Any) -> OperationResult:
        """Fetch one active café by place id or record id.

        Args:
            param: Raw route parameter.

        Returns:
            OperationResult with the café, PERMANENT_ERROR for an invalid
            parameter, NOT_FOUND when no active café matches.
        """
        config = get_detail_route_query_config(param)
        if config is None:
            return OperationResult.permanent_error(
                message="Invalid cafe identifier", error_code="INVALID_CAFE_ID"
            )

        log = logger.bind(
            queried_column=config.queried_column, param=config.param[:30]
        )
        result = self._list(
            filters=[
                (config.queried_column, eq(config.param)),
                ("or", ACTIVE_FILTER),
            ],
            limit=1,
        )
        if not result.is_success:
            log.warning("cafe_lookup_failed", status=result.status.value)
            return result

        if not result.data:
            log.info("cafe_not_found")
            return OperationResult.not_found(message="Cafe not found")
        return OperationResult.success(data=result.data[0])

    def list_by_city(self, city: str) -> OperationResult:
        """Active cafés of a city (case-insensitive), best work score first."""
        if not city or not city.strip():
            return OperationResult.success(data=[])
        return self._list(
            filters=[("city", f"ilike.{city.strip()}"), ("or", ACTIVE_FILTER)],
            order="work_score.desc.nullslast",
        )

    def list_top_rated(self, limit: int = 10) -> OperationResult:
        """Active cafés with a work score, ordered by score then rating."""
        return self._list(
            filters=[("or", ACTIVE_FILTER), ("work_score", "not.is.null")],
            order=(
                "work_score.desc.nullslast,google_rating.desc.nullslast,"
                "google_ratings_total.desc.nullslast"
            ),
            limit=limit,
        )

    def list_recent(self, limit: int = 10) -> OperationResult:
        """Most recently added active cafés."""
        return self._list(
            filters=[("or", ACTIVE_FILTER)],
            order="created_at.desc",
            limit=limit,
        )

    def list_in_bounds(self, box: BoundingBox, limit: int = NEARBY_LIMIT) -> OperationResult:
        """Active cafés with coordinates inside a bounding box."""
        return self._list(
            filters=[
                ("is_active", "eq.true"),
                ("latitude", f"gte.{box.min_lat}"),
                ("latitude", f"lte.{box.max_lat}"),
                ("longitude", f"gte.{box.min_lng}"),
                ("longitude", f"lte.{box.max_lng}"),
            ],
            limit=limit,
        )

    def list_with_feature_in_bounds(
        self,
        box: BoundingBox,
        feature: CafeFeature,
        limit: int = NEARBY_LIMIT,
    ) -> OperationResult:
        """Active cafés inside a bounding box that offer a feature."""
        return self._list(
            filters=[
                ("or", ACTIVE_FILTER),
                ("latitude", f"gte.{box.min_lat}"),
                ("latitude", f"lte.{box.max_lat}"),
                ("longitude", f"gte.{box.min_lng}"),
                ("longitude", f"lte.{box.max_lng}"),
                *feature_filters(feature),
            ],
            limit=limit,
        )

    def list_for_sitemap(self, limit: int) -> OperationResult:
        """Identifiers and timestamps of active cafés."""
        return self._list(
            columns="id,place_id,name,city,updated_at,created_at,is_active",
            filters=[("or", ACTIVE_FILTER)],
            order="updated_at.desc.nullslast",
            limit=limit,
        )

    def list_cities(self) -> OperationResult:
        """City column of every active café.

        Rows only carry the city, so they are returned without validation.
        """
        return self.client.select(
            CAFES_TABLE, columns="city", filters=[("or", ACTIVE_FILTER)]
        )

    def create(self, values: Dict[str, Any]) -> OperationResult:
        """Insert a café and return the stored row."""
        result = self.client.insert(CAFES_TABLE, values)
        return self._first(result)

    def update(self, cafe_id: str, values: Dict[str, Any]) -> OperationResult:
        """Update a café by record id and return the stored row."""
        result = self.client.update(CAFES_TABLE, values, filters=[("id", eq(cafe_id))])
        return self._first(result)

    @staticmethod
    def _first(result: OperationResult) -> OperationResult:
        if not result.is_success:
            return result
        rows: Optional[list] = result.data
        if not rows:
            return OperationResult.not_found(message="Cafe not found")
        return OperationResult.success(data=rows[0])
