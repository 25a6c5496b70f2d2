"""FastAPI routes for submissions package."""

import uuid

import structlog
from fastapi import APIRouter, HTTPException, Request

from api.dependencies.rate_limits import get_limiter
from infrastructure.i18n import Locale, LocaleResolver, is_valid_locale
from infrastructure.logging import get_correlation_id
from infrastructure.operations import OperationStatus
from packages.submissions.dependencies import SubmissionRepositoryDep
from packages.submissions.schemas import (
    ConsentContext,
    SubmissionCreate,
    SubmissionResponse,
)
from packages.submissions.service import create_submission

logger = structlog.get_logger()
router = APIRouter(prefix="/submissions", tags=["submissions"])
limiter = get_limiter()
locale_resolver = LocaleResolver()


def consent_context(request: Request, payload: SubmissionCreate) -> ConsentContext:
    """Locale, client IP and user agent recorded with an email consent."""
    if is_valid_locale(payload.locale):
        locale = Locale(payload.locale)
    else:
        locale = locale_resolver.resolve_from_header(
            request.headers.get("accept-language")
        )

    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        ip = forwarded.split(",")[0].strip()
    else:
        ip = request.headers.get("x-real-ip") or "unknown"

    return ConsentContext(
        locale=locale,
        ip=ip,
        user_agent=request.headers.get("user-agent") or "unknown",
    )


@router.post(
    "",
    response_model=SubmissionResponse,
    status_code=201,
    summary="Suggest a Café",
    description="Store a café suggestion for review",
)
@limiter.limit("10/minute")
def post_submission(
    request: Request,
    payload: SubmissionCreate,
    repository: SubmissionRepositoryDep,
) -> SubmissionResponse:
    """Submit a café suggestion.

    Raises:
        HTTPException: 400 for invalid input, 429 for a duplicate within the
            last hour, 502 when the database is unavailable
    """
    request_id = get_correlation_id() or str(uuid.uuid4())
    log = logger.bind(request_id=request_id, endpoint="/submissions")

    result = create_submission(
        repository,
        payload,
        request_id=request_id,
        consent=consent_context(request, payload),
    )

    if result.is_success:
        return SubmissionResponse(request_id=request_id)
    elif result.error_code == "DUPLICATE_SUBMISSION":
        raise HTTPException(
            status_code=429,
            detail=result.message,
            headers={"Retry-After": str(result.retry_after)},
        )
    elif result.status == OperationStatus.PERMANENT_ERROR:
        raise HTTPException(status_code=400, detail=result.message)
    else:
        log.error("submission_error", status=result.status.value, error=result.message)
        raise HTTPException(status_code=502, detail="Submission failed")
