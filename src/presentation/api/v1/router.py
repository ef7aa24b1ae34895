from fastapi import APIRouter

from .branches import branch_router
from .users import user_router
from .health import health_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(branch_router, tags=["Branches"])
router.include_router(user_router, tags=["Users"])
