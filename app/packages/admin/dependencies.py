"""Dependency providers for admin package."""

from typing import Annotated, Any, Dict

import structlog
from fastapi import Depends, HTTPException

from infrastructure.security import validate_jwt_token
from infrastructure.services import ServiceClientDep
from packages.admin.schemas import AdminUser
from packages.admin.service import is_admin

logger = structlog.get_logger()


def require_admin(
    client: ServiceClientDep,
    claims: Annotated[Dict[str, Any], Depends(validate_jwt_token)],
) -> AdminUser:
    """Resolve the authenticated admin or reject the request.

    Raises:
        HTTPException: 403 if the user is not an admin, 502 if the admin
            lookup fails
    """
    user = AdminUser(id=claims["sub"], email=claims.get("email"))
    log = logger.bind(user_id=user.id)

    result = is_admin(client, user.id)
    if not result.is_success:
        log.error("admin_check_failed", error=result.message)
        raise HTTPException(status_code=502, detail="Failed to verify admin status")
    if not result.data:
        log.warning("admin_access_denied")
        raise HTTPException(status_code=403, detail="Forbidden")

    log.info("admin_authenticated")
    return user


AdminDep = Annotated[AdminUser, Depends(require_admin)]
