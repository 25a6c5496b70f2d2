"""
Business logic for café submissions.

Submissions are stored as pending suggestions for admins to review. The
email consent log is best effort: once the submission is stored, consent
failures are logged and never reported to the submitter.
"""

import re
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from urllib.parse import urlparse

import structlog

from infrastructure.operations import OperationResult, OperationStatus
from packages.cafes.display import is_valid_public_url
from packages.submissions.repository import SubmissionRepository
from packages.submissions.schemas import ConsentContext, SubmissionCreate

logger = structlog.get_logger()

DUPLICATE_WINDOW = timedelta(hours=1)
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

REQUIRED_FIELDS = (
    ("name", "Café name"),
    ("city", "City"),
    ("address", "Address"),
)

OPTIONAL_FIELDS = (
    "website",
    "google_maps_url",
    "submitter_email",
    "notes",
    "wifi_notes",
    "power_notes",
    "noise_notes",
    "time_limit_notes",
)


def _is_url(value: str) -> bool:
    parsed = urlparse(value)
    return bool(parsed.scheme and (parsed.netloc or parsed.path))


def validate_submission(payload: SubmissionCreate) -> Optional[OperationResult]:
    """Check required fields and URL/email formats.

    Returns:
        A PERMANENT_ERROR result describing the first problem, or None.
    """
    for field_name, label in REQUIRED_FIELDS:
        if not getattr(payload, field_name):
            return OperationResult.permanent_error(
                message=f"{label} is required", error_code="MISSING_FIELD"
            )

    if payload.website:
        if not _is_url(payload.website):
            return OperationResult.permanent_error(
                message="Please provide a valid website URL",
                error_code="INVALID_WEBSITE",
            )
        if not is_valid_public_url(payload.website):
            return OperationResult.permanent_error(
                message="Localhost URLs are not allowed. Please provide a public website URL.",
                error_code="INVALID_WEBSITE",
            )

    if payload.google_maps_url and not _is_url(payload.google_maps_url):
        return OperationResult.permanent_error(
            message="Please provide a valid Google Maps URL",
            error_code="INVALID_MAPS_URL",
        )

    if payload.submitter_email and not EMAIL_PATTERN.match(payload.submitter_email):
        return OperationResult.permanent_error(
            message="Please provide a valid email address",
            error_code="INVALID_EMAIL",
        )

    return None


def build_submission_row(payload: SubmissionCreate) -> Dict[str, Any]:
    """Row inserted for a new pending web submission."""
    row: Dict[str, Any] = {
        "name": payload.name,
        "city": payload.city,
        "address": payload.address,
    }
    for field_name in OPTIONAL_FIELDS:
        row[field_name] = getattr(payload, field_name) or None
    row["status"] = "pending"
    row["source"] = "web"
    return row


def create_submission(
    repository: SubmissionRepository,
    payload: SubmissionCreate,
    request_id: str,
    consent: Optional[ConsentContext] = None,
) -> OperationResult:
    """
    Validate and store a café submission.

    Args:
        repository: Submission repository
        payload: Submitted form
        request_id: Identifier returned to the submitter
        consent: Request details for the consent log

    Returns:
        OperationResult: SUCCESS with the request id, PERMANENT_ERROR for
        invalid input, TRANSIENT_ERROR with DUPLICATE_SUBMISSION for a repeat
        within the last hour, or the repository error.
    """
    log = logger.bind(request_id=request_id, operation="create_submission")
    log.info("submission_received", city=payload.city)

    invalid = validate_submission(payload)
    if invalid is not None:
        log.info("submission_invalid", error=invalid.message)
        return invalid

    since = datetime.now(timezone.utc) - DUPLICATE_WINDOW
    duplicate = repository.has_recent_duplicate(
        payload.name, payload.city, payload.address, since
    )
    if not duplicate.is_success:
        log.error("duplicate_check_failed", error=duplicate.message)
        return duplicate
    if duplicate.data:
        log.info("duplicate_submission")
        return OperationResult.error(
            status=OperationStatus.TRANSIENT_ERROR,
            message="A similar submission was recently submitted. Please wait before submitting again.",
            error_code="DUPLICATE_SUBMISSION",
            retry_after=int(DUPLICATE_WINDOW.total_seconds()),
        )

    created = repository.create(build_submission_row(payload))
    if not created.is_success:
        log.error("submission_insert_failed", error=created.message)
        return created

    if payload.submitter_email and payload.email_consent and consent is not None:
        consent_result = repository.log_email_consent(
            {
                "purpose": "notify_submission",
                "consented": True,
                "email": payload.submitter_email,
                "locale": consent.locale.value,
                "ip": consent.ip,
                "user_agent": consent.user_agent,
            }
        )
        if not consent_result.is_success:
            log.error("email_consent_log_failed", error=consent_result.message)

    log.info("submission_created")
    return OperationResult.success(data={"request_id": request_id})
