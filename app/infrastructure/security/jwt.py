"""Access token validation and claims extraction.

Access tokens are HS256 JWTs signed by the auth provider with the project's
JWT secret; the magic-link flow that issues them happens elsewhere.
"""

from typing import Any, Dict, Optional, Tuple

import structlog
from fastapi import HTTPException, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jwt import PyJWTError, decode

from infrastructure.services import SettingsDep

logger = structlog.get_logger()
security = HTTPBearer(auto_error=False)

ALGORITHMS = ["HS256"]


def extract_user_info_from_token(token: str) -> Tuple[Optional[str], Optional[str]]:
    """Extract user ID and email from a token without verifying its signature.

    Only meant for logging context; never for authorization.

    Args:
        token: The JWT token

    Returns:
        Tuple of (user_id, email). Either or both may be None if not in token.
    """
    try:
        payload = decode(token, options={"verify_signature": False})
    except PyJWTError as e:
        log = logger.bind(error=str(e))
        log.debug("user_info_extraction_failed")
        return None, None

    return payload.get("sub"), payload.get("email")


def validate_access_token(token: str, secret: str, audience: str) -> Dict[str, Any]:
    """Verify a token's signature, expiry and audience.

    Args:
        token: The JWT token
        secret: Shared signing secret
        audience: Expected aud claim

    Returns:
        The decoded and verified JWT payload

    Raises:
        HTTPException: 401 if the token is invalid or has no subject
    """
    try:
        payload = decode(
            token,
            secret,
            algorithms=ALGORITHMS,
            audience=audience,
            options={"verify_exp": True},
        )
    except PyJWTError as e:
        log = logger.bind(error=str(e))
        log.warning("jwt_validation_failed")
        raise HTTPException(status_code=401, detail="Invalid token") from e

    if not payload.get("sub"):
        raise HTTPException(status_code=401, detail="Token has no subject")

    logger.debug("jwt_validation_successful", user_id=payload["sub"])
    return payload


def validate_jwt_token(
    settings: SettingsDep,
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
) -> Dict[str, Any]:
    """FastAPI dependency returning the verified claims of the bearer token.

    Raises:
        HTTPException: 500 if no JWT secret is configured, 401 if the token
            is missing or invalid
    """
    secret = settings.supabase.SUPABASE_JWT_SECRET
    if not secret:
        logger.error("jwt_secret_not_configured")
        raise HTTPException(status_code=500, detail="Authentication not configured")

    if (
        credentials is None
        or credentials.scheme.lower() != "bearer"
        or not credentials.credentials
    ):
        raise HTTPException(status_code=401, detail="Missing or invalid token")

    return validate_access_token(
        credentials.credentials,
        secret,
        settings.supabase.SUPABASE_JWT_AUDIENCE,
    )
