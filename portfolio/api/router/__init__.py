from fastapi import APIRouter

from .health import health_check
from .projects import project_router
from .experiences import experience_router
from .profile import profile_router


api_router = APIRouter(prefix="/api")
api_router.include_router(project_router, prefix="/projects", tags=["projects"])
api_router.include_router(experience_router, prefix="/experiences", tags=["experiences"])
api_router.include_router(profile_router, prefix="/profile", tags=["profile"])


__all__ = ["api_router", "health_check"]
