"""Route initialization module."""

from fastapi import APIRouter
from users_api.routes.health import router as health_router
from users_api.routes.users import router as users_router

# Create main API router
api_router = APIRouter(prefix="/api")

# Include sub-routers
api_router.include_router(health_router)

# User routes live at the root (/users)
users_router_no_prefix = APIRouter()
users_router_no_prefix.include_router(users_router)


__all__ = ["api_router", "users_router_no_prefix"]
