"""Submission data access over PostgREST."""

from datetime import datetime
from typing import Any, Dict, Optional

from infrastructure.operations import OperationResult
from integrations.supabase import SupabaseClient, eq

SUBMISSIONS_TABLE = "submissions"
CONSENT_LOG_TABLE = "email_consent_log"


class SubmissionRepository:
    """Queries against the submissions and consent log tables."""

    def __init__(self, client: SupabaseClient):
        self.client = client

    def has_recent_duplicate(
        self, name: str, city: str, address: str, since: datetime
    ) -> OperationResult:
        """Check for a submission with the same name, city and address.

        Returns:
            OperationResult with True or False as data
        """
        result = self.client.select(
            SUBMISSIONS_TABLE,
            columns="id",
            filters=[
                ("name", eq(name)),
                ("city", eq(city)),
                ("address", eq(address)),
                ("created_at", f"gte.{since.isoformat()}"),
            ],
            limit=1,
        )
        if not result.is_success:
            return result
        return OperationResult.success(data=bool(result.data))

    def create(self, values: Dict[str, Any]) -> OperationResult:
        return self._first(self.client.insert(SUBMISSIONS_TABLE, values))

    def get(self, submission_id: str) -> OperationResult:
        result = self.client.select(
            SUBMISSIONS_TABLE, filters=[("id", eq(submission_id))], limit=1
        )
        return self._first(result)

    def list_by_status(
        self, status: Optional[str] = "pending", limit: int = 100
    ) -> OperationResult:
        """Submissions with a status, newest first; all when status is None."""
        filters = [("status", eq(status))] if status else []
        return self.client.select(
            SUBMISSIONS_TABLE,
            filters=filters,
            order="created_at.desc",
            limit=limit,
        )

    def update(self, submission_id: str, values: Dict[str, Any]) -> OperationResult:
        result = self.client.update(
            SUBMISSIONS_TABLE, values, filters=[("id", eq(submission_id))]
        )
        return self._first(result)

    def log_email_consent(self, row: Dict[str, Any]) -> OperationResult:
        return self.client.insert(CONSENT_LOG_TABLE, row, returning=False)

    @staticmethod
    def _first(result: OperationResult) -> OperationResult:
        if not result.is_success:
            return result
        if not result.data:
            return OperationResult.not_found(message="Submission not found")
        return OperationResult.success(data=result.data[0])
