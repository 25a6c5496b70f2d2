"""
Business logic for the admin API.

Covers the admin check, review decisions on submissions and direct café
maintenance. All functions return OperationResults.
"""

import re
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import structlog

from infrastructure.operations import OperationResult, OperationStatus
from integrations.supabase import SupabaseClient, eq
from packages.cafes.display import is_valid_public_url
from packages.cafes.repository import CafeRepository
from packages.submissions.repository import SubmissionRepository
from packages.admin.schemas import CafeFields

logger = structlog.get_logger()

ADMIN_USERS_TABLE = "admin_users"
UUID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)


def is_admin(client: SupabaseClient, user_id: str) -> OperationResult:
    """Check whether a user has a row in admin_users.

    Returns:
        OperationResult with True or False as data, or the client error.
    """
    result = client.select(
        ADMIN_USERS_TABLE, columns="id", filters=[("id", eq(user_id))], limit=1
    )
    if not result.is_success:
        return result
    return OperationResult.success(data=bool(result.data))


def decide_submission(
    submissions: SubmissionRepository,
    cafes: CafeRepository,
    submission_id: str,
    decision: str,
    admin_user_id: str,
    review_notes: Optional[str] = None,
) -> OperationResult:
    """
    Approve or reject a pending submission.

    Approving creates an active café from the submission and links it.

    Returns:
        OperationResult: SUCCESS with status and cafe_id; PERMANENT_ERROR
        INVALID_ID for a malformed id; NOT_FOUND; PERMANENT_ERROR NOT_PENDING
        when the submission was already reviewed.
    """
    log = logger.bind(
        submission_id=submission_id,
        decision=decision,
        admin_user_id=admin_user_id,
        operation="decide_submission",
    )

    if not UUID_PATTERN.match(submission_id or ""):
        return OperationResult.permanent_error(
            message="Invalid id", error_code="INVALID_ID"
        )

    loaded = submissions.get(submission_id)
    if not loaded.is_success:
        log.info("submission_load_failed", status=loaded.status.value)
        return loaded

    submission = loaded.data
    if submission.get("status") != "pending":
        return OperationResult.permanent_error(
            message="Not pending", error_code="NOT_PENDING"
        )

    review = {
        "review_notes": review_notes,
        "reviewed_at": datetime.now(timezone.utc).isoformat(),
        "reviewed_by": admin_user_id,
    }

    if decision == "reject":
        updated = submissions.update(submission_id, {"status": "rejected", **review})
        if not updated.is_success:
            log.error("submission_reject_failed", error=updated.message)
            return updated
        log.info("submission_rejected")
        return OperationResult.success(data={"status": "rejected", "cafe_id": None})

    created = cafes.create(
        {
            "name": submission.get("name"),
            "city": submission.get("city"),
            "address": submission.get("address"),
            "website": submission.get("website"),
            "google_maps_url": submission.get("google_maps_url"),
            "is_active": True,
        }
    )
    if not created.is_success:
        log.error("cafe_create_failed", error=created.message)
        return created

    cafe_id = created.data.get("id")
    updated = submissions.update(
        submission_id, {"status": "approved", "cafe_id": cafe_id, **review}
    )
    if not updated.is_success:
        log.error("submission_approve_failed", cafe_id=cafe_id, error=updated.message)
        return updated

    log.info("submission_approved", cafe_id=cafe_id)
    return OperationResult.success(data={"status": "approved", "cafe_id": cafe_id})


def validate_cafe_fields(fields: CafeFields, require_core: bool) -> Optional[OperationResult]:
    """Check required fields, coordinate ranges and the website URL.

    Returns:
        A PERMANENT_ERROR result for the first problem, or None.
    """
    if require_core and not (fields.name and fields.address and fields.city):
        return OperationResult.permanent_error(
            message="Name, address, and city are required fields.",
            error_code="MISSING_FIELD",
        )
    if fields.latitude is not None and not -90 <= fields.latitude <= 90:
        return OperationResult.permanent_error(
            message="Latitude must be a number between -90 and 90.",
            error_code="INVALID_LATITUDE",
        )
    if fields.longitude is not None and not -180 <= fields.longitude <= 180:
        return OperationResult.permanent_error(
            message="Longitude must be a number between -180 and 180.",
            error_code="INVALID_LONGITUDE",
        )
    if fields.website and not is_valid_public_url(fields.website):
        return OperationResult.permanent_error(
            message="Localhost URLs are not allowed. Please provide a public website URL.",
            error_code="INVALID_WEBSITE",
        )
    return None


def create_cafe(cafes: CafeRepository, fields: CafeFields) -> OperationResult:
    """Validate and insert a café."""
    invalid = validate_cafe_fields(fields, require_core=True)
    if invalid is not None:
        return invalid

    values: Dict[str, Any] = fields.model_dump(exclude_none=True)
    result = cafes.create(values)
    if result.is_success:
        logger.info("cafe_created", cafe_id=result.data.get("id"))
    return result


def update_cafe(cafes: CafeRepository, cafe_id: str, fields: CafeFields) -> OperationResult:
    """Validate and apply a partial café update."""
    if not UUID_PATTERN.match(cafe_id or ""):
        return OperationResult.permanent_error(
            message="Invalid id", error_code="INVALID_ID"
        )

    invalid = validate_cafe_fields(fields, require_core=False)
    if invalid is not None:
        return invalid

    values = fields.model_dump(exclude_unset=True)
    if not values:
        return OperationResult.permanent_error(
            message="No fields to update", error_code="EMPTY_UPDATE"
        )

    result = cafes.update(cafe_id, values)
    if result.is_success:
        logger.info("cafe_updated", cafe_id=cafe_id, fields=sorted(values))
    elif result.status == OperationStatus.NOT_FOUND:
        logger.info("cafe_update_not_found", cafe_id=cafe_id)
    return result
