"""FastAPI routes for admin package."""

from typing import Optional

import structlog
from fastapi import APIRouter, HTTPException, Query

from infrastructure.operations import OperationResult, OperationStatus
from packages.admin.dependencies import AdminDep
from packages.admin.schemas import (
    CafeCreate,
    CafeResponse,
    CafeUpdate,
    DecisionRequest,
    DecisionResponse,
    SubmissionList,
)
from packages.admin.service import create_cafe, decide_submission, update_cafe
from packages.cafes.dependencies import AdminCafeRepositoryDep
from packages.submissions.dependencies import SubmissionRepositoryDep

logger = structlog.get_logger()
router = APIRouter(prefix="/admin", tags=["admin"])

CONFLICT_CODES = {"NOT_PENDING", "HTTP_409"}


def raise_for_result(result: OperationResult, log) -> None:
    """Map a failed OperationResult to an HTTPException."""
    if result.status == OperationStatus.NOT_FOUND:
        raise HTTPException(status_code=404, detail="Not found")
    if result.error_code in CONFLICT_CODES:
        raise HTTPException(status_code=409, detail=result.message)
    if result.status == OperationStatus.PERMANENT_ERROR:
        raise HTTPException(status_code=400, detail=result.message)
    log.error("admin_operation_error", status=result.status.value, error=result.message)
    raise HTTPException(status_code=502, detail="Database operation failed")


@router.get(
    "/submissions",
    response_model=SubmissionList,
    summary="List Submissions",
)
def list_submissions(
    admin: AdminDep,
    repository: SubmissionRepositoryDep,
    status: Optional[str] = Query("pending", pattern="^(pending|approved|rejected)$"),
    limit: int = Query(100, ge=1, le=500),
) -> SubmissionList:
    """List submissions by status, newest first."""
    log = logger.bind(admin_user_id=admin.id, endpoint="/admin/submissions")
    result = repository.list_by_status(status, limit=limit)
    if not result.is_success:
        raise_for_result(result, log)
    rows = result.data or []
    return SubmissionList(submissions=rows, count=len(rows))


@router.post(
    "/submissions/{submission_id}/decision",
    response_model=DecisionResponse,
    summary="Review Submission",
)
def post_decision(
    submission_id: str,
    body: DecisionRequest,
    admin: AdminDep,
    submissions: SubmissionRepositoryDep,
    cafes: AdminCafeRepositoryDep,
) -> DecisionResponse:
    """Approve or reject a pending submission.

    Raises:
        HTTPException: 400 invalid id, 404 unknown submission, 409 already
            reviewed, 502 database failure
    """
    log = logger.bind(admin_user_id=admin.id, submission_id=submission_id)

    result = decide_submission(
        submissions,
        cafes,
        submission_id=submission_id,
        decision=body.decision,
        admin_user_id=admin.id,
        review_notes=body.review_notes,
    )
    if not result.is_success:
        raise_for_result(result, log)

    return DecisionResponse(submission_id=submission_id, **result.data)


@router.post(
    "/cafes",
    response_model=CafeResponse,
    status_code=201,
    summary="Create Café",
)
def post_cafe(
    body: CafeCreate, admin: AdminDep, cafes: AdminCafeRepositoryDep
) -> CafeResponse:
    log = logger.bind(admin_user_id=admin.id, endpoint="/admin/cafes")
    result = create_cafe(cafes, body)
    if not result.is_success:
        raise_for_result(result, log)
    return CafeResponse(cafe=result.data)


@router.patch(
    "/cafes/{cafe_id}",
    response_model=CafeResponse,
    summary="Update Café",
)
def patch_cafe(
    cafe_id: str, body: CafeUpdate, admin: AdminDep, cafes: AdminCafeRepositoryDep
) -> CafeResponse:
    log = logger.bind(admin_user_id=admin.id, cafe_id=cafe_id)
    result = update_cafe(cafes, cafe_id, body)
    if not result.is_success:
        raise_for_result(result, log)
    return CafeResponse(cafe=result.data)
