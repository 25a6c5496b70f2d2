from fastapi import APIRouter
from api.v1.routes.i18n import router as i18n_router
from packages.admin.routes import router as admin_router
from packages.cafes.routes import router as cafes_router
from packages.submissions.routes import router as submissions_router


# Main v1 router (includes all endpoints)
router = APIRouter()
router.include_router(cafes_router)
router.include_router(submissions_router)
router.include_router(admin_router)
router.include_router(i18n_router)
