"""PostgREST client for the hosted Supabase database.

Every call returns an OperationResult so callers never deal with requests
exceptions or raw status codes.

Usage:
    from integrations.supabase import SupabaseClient

    client = SupabaseClient(base_url="https://xyz.supabase.co", api_key="anon")
    result = client.select(
        "cafes",
        filters=[("city", "eq.Berlin"), ("or", ACTIVE_FILTER)],
        order="work_score.desc.nullslast",
    )
    if result.is_success:
        rows = result.data
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import requests
import structlog

from infrastructure.operations import OperationResult, OperationStatus

logger = structlog.get_logger(__name__)

Filters = Sequence[Tuple[str, str]]

# Rows with no explicit is_active flag count as active
ACTIVE_FILTER = "(is_active.is.null,is_active.eq.true)"


def eq(value: Any) -> str:
    """Build a PostgREST equality filter value."""
    return f"eq.{value}"


class SupabaseClient:
    """HTTP client for the PostgREST endpoints of a Supabase project.

    Attributes:
        base_url: Project URL without trailing slash
        timeout: Default timeout in seconds
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: int = 10,
        access_token: Optional[str] = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Project URL (e.g. https://xyz.supabase.co)
            api_key: anon or service role key
            timeout: Default timeout for requests in seconds
            access_token: User access token; requests run as that user when set
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = requests.Session()
        self._session.headers.update(
            {
                "apikey": api_key,
                "Authorization": f"Bearer {access_token or api_key}",
                "Accept": "application/json",
                "Content-Type": "application/json",
            }
        )
        self._logger = logger.bind(component="supabase_client")

    def select(
        self,
        table: str,
        columns: str = "*",
        filters: Optional[Filters] = None,
        order: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> OperationResult:
        """Read rows from a table.

        Args:
            table: Table name
            columns: PostgREST select list
            filters: (column, "op.value") pairs; repeated columns allowed
            order: PostgREST order clause (e.g. "created_at.desc")
            limit: Maximum number of rows

        Returns:
            OperationResult with the list of rows
        """
        params: List[Tuple[str, str]] = [("select", columns)]
        params.extend(filters or [])
        if order:
            params.append(("order", order))
        if limit is not None:
            params.append(("limit", str(limit)))
        return self._request("GET", f"/rest/v1/{table}", params=params)

    def insert(
        self,
        table: str,
        rows: Union[Dict[str, Any], List[Dict[str, Any]]],
        returning: bool = True,
    ) -> OperationResult:
        """Insert one or more rows.

        Returns:
            OperationResult with the inserted rows when returning is set
        """
        return self._request(
            "POST",
            f"/rest/v1/{table}",
            json_data=rows,
            headers={"Prefer": self._prefer(returning)},
        )

    def update(
        self,
        table: str,
        values: Dict[str, Any],
        filters: Filters,
        returning: bool = True,
    ) -> OperationResult:
        """Update the rows matching filters.

        Raises:
            ValueError: If no filter is given, which would update every row.
        """
        if not filters:
            raise ValueError("update requires at least one filter")
        return self._request(
            "PATCH",
            f"/rest/v1/{table}",
            json_data=values,
            params=list(filters),
            headers={"Prefer": self._prefer(returning)},
        )

    def rpc(
        self, function: str, params: Optional[Dict[str, Any]] = None
    ) -> OperationResult:
        """Call a database function."""
        return self._request("POST", f"/rest/v1/rpc/{function}", json_data=params or {})

    @staticmethod
    def _prefer(returning: bool) -> str:
        return "return=representation" if returning else "return=minimal"

    def _request(
        self,
        method: str,
        path: str,
        json_data: Optional[Any] = None,
        params: Optional[Filters] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[int] = None,
    ) -> OperationResult:
        """Send a request and map the response to an OperationResult.

        Args:
            method: HTTP method
            path: Path below the project URL
            json_data: JSON request body
            params: Query parameters
            headers: Additional headers
            timeout: Request timeout

        Returns:
            OperationResult with response data or error
        """
        url = f"{self.base_url}{path}"
        timeout = timeout or self.timeout

        log = self._logger.bind(method=method, path=path)
        log.debug("supabase_request")

        try:
            response = self._session.request(
                method=method,
                url=url,
                json=json_data,
                params=params,
                headers=headers,
                timeout=timeout,
            )
        except requests.Timeout:
            log.error("supabase_timeout", timeout=timeout)
            return OperationResult.transient_error(
                message=f"Request timeout after {timeout}s",
                error_code="TIMEOUT",
            )
        except requests.RequestException as e:
            log.error("supabase_connection_error", error=str(e))
            return OperationResult.transient_error(
                message=f"Connection error: {str(e)}",
                error_code="CONNECTION_ERROR",
            )

        log = log.bind(status_code=response.status_code)

        response_data: Optional[Any] = None
        if response.content:
            try:
                response_data = response.json()
            except requests.JSONDecodeError:
                log.warning("non_json_response", content=response.text[:200])

        if 200 <= response.status_code < 300:
            log.debug("supabase_success")
            return OperationResult.success(
                data=response_data,
                message=f"{method} {path} succeeded",
            )

        error_message = self._extract_error_message(response_data, response.text)

        if 400 <= response.status_code < 500:
            log.warning("supabase_client_error", error=error_message)

            if response.status_code in (401, 403):
                return OperationResult.error(
                    status=OperationStatus.UNAUTHORIZED,
                    message=error_message,
                    error_code=f"HTTP_{response.status_code}",
                )
            if response.status_code == 404:
                return OperationResult.not_found(
                    message=error_message, error_code="HTTP_404"
                )
            if response.status_code == 429:
                return OperationResult.transient_error(
                    message=error_message,
                    error_code="HTTP_429",
                    retry_after=self._retry_after(response),
                )
            return OperationResult.permanent_error(
                message=error_message,
                error_code=f"HTTP_{response.status_code}",
            )

        log.error("supabase_server_error", error=error_message)
        return OperationResult.transient_error(
            message=error_message,
            error_code=f"HTTP_{response.status_code}",
            retry_after=self._retry_after(response),
        )

    @staticmethod
    def _retry_after(response: requests.Response) -> Optional[int]:
        retry_after = response.headers.get("Retry-After")
        if not retry_after:
            return None
        try:
            return int(retry_after)
        except ValueError:
            return 60

    @staticmethod
    def _extract_error_message(response_data: Any, response_text: str) -> str:
        """Extract error message from a PostgREST error body."""
        if isinstance(response_data, dict):
            for key in ["message", "error", "details", "hint"]:
                if response_data.get(key):
                    return str(response_data[key])

        return response_text[:200] if response_text else "Unknown error"

    def close(self) -> None:
        """Close HTTP session and release connections."""
        self._session.close()
        self._logger.debug("supabase_client_closed")
