"""HTTP middleware: locale redirects and request-scoped logging context."""

import re
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response

from infrastructure.i18n import DEFAULT_LOCALE, is_valid_locale
from infrastructure.logging import bind_request_context, get_module_logger
from infrastructure.security import extract_user_info_from_token

logger = get_module_logger()

REQUEST_ID_HEADER = "X-Request-ID"

# Paths that are not localized pages
EXCLUDED_PREFIXES = (
    "/api",
    "/admin",
    "/login",
    "/docs",
    "/redoc",
)
EXCLUDED_PATHS = frozenset(
    {
        "/openapi.json",
        "/health",
        "/version",
        "/robots.txt",
        "/sitemap.xml",
        "/favicon.ico",
    }
)
STATIC_FILE_PATTERN = re.compile(r"\.(?:svg|png|jpg|jpeg|gif|webp|ico)$", re.IGNORECASE)


def is_excluded(path: str) -> bool:
    """Whether a path bypasses the locale redirect."""
    if path in EXCLUDED_PATHS or STATIC_FILE_PATTERN.search(path):
        return True
    return any(
        path == prefix or path.startswith(prefix + "/") for prefix in EXCLUDED_PREFIXES
    )


def localized_redirect_path(path: str) -> str:
    """Path under the default locale, without a trailing slash.

    Examples:
        "/" -> "/de"
        "/cities/berlin/" -> "/de/cities/berlin"
    """
    if path != "/" and path.endswith("/"):
        path = path[:-1]
    return f"/{DEFAULT_LOCALE.value}{'' if path == '/' else path}"


class LocaleRedirectMiddleware(BaseHTTPMiddleware):
    """Permanently redirect public paths without locale to the default locale."""

    async def dispatch(self, request: Request, call_next) -> Response:
        path = request.url.path
        if is_excluded(path):
            return await call_next(request)

        segments = [segment for segment in path.split("/") if segment]
        if segments and is_valid_locale(segments[0]):
            return await call_next(request)

        target = localized_redirect_path(path)
        if request.url.query:
            target = f"{target}?{request.url.query}"
        logger.debug("locale_redirect", path=path, target=target)
        return RedirectResponse(url=target, status_code=308)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Bind a correlation id and the caller's user id to every log line.

    The id is taken from the X-Request-ID header when present and echoed on
    the response. The user id is read from an unverified bearer token; it
    only labels log lines and never grants access.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        user_id = None
        scheme, _, token = request.headers.get("Authorization", "").partition(" ")
        if scheme.lower() == "bearer" and token:
            user_id, _ = extract_user_info_from_token(token)

        with bind_request_context(
            correlation_id=request_id,
            user_id=user_id,
            request_path=request.url.path,
            request_method=request.method,
        ):
            response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
