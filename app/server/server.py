from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.router import api_router
from api.dependencies.rate_limits import setup_rate_limiter, get_limiter
from infrastructure.logging import get_module_logger
from infrastructure.services import get_settings
from server.lifespan import lifespan
from server.middleware import LocaleRedirectMiddleware, RequestContextMiddleware

logger = get_module_logger()
settings = get_settings()


handler = FastAPI(
    title="Café Directory",
    description="Localized directory of laptop-friendly cafés",
    lifespan=lifespan,
)
setup_rate_limiter(handler)
limiter = get_limiter()


allow_origins = (
    [settings.server.SITE_URL]
    if settings.is_production
    else settings.server.allowed_origins
)

# Starlette runs the last added middleware first
handler.add_middleware(LocaleRedirectMiddleware)
handler.add_middleware(RequestContextMiddleware)
handler.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


handler.include_router(api_router)
