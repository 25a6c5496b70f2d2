"""Infrastructure security and authentication services.

Exports:
    extract_user_info_from_token: Extract user info from JWT token
    validate_access_token: Verify a token and return its claims
    validate_jwt_token: FastAPI dependency for bearer token validation
"""

from infrastructure.security.jwt import (
    extract_user_info_from_token,
    validate_access_token,
    validate_jwt_token,
)

__all__ = [
    "extract_user_info_from_token",
    "validate_access_token",
    "validate_jwt_token",
]
