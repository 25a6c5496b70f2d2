from fastapi import APIRouter
from api.routes.system import router as system_router
from api.v1.router import router as v1_router
from packages.pages.routes import router as pages_router
from packages.seo.routes import router as seo_router

api_router = APIRouter()

api_router.include_router(system_router)
api_router.include_router(seo_router)
api_router.include_router(v1_router, prefix="/api/v1")
# Catch-all /{locale} paths go last
api_router.include_router(pages_router)
