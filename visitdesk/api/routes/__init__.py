from fastapi import APIRouter

from visitdesk.api.routes import auth, health, visits

api_router = APIRouter()
api_router.include_router(health.router, tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(visits.router, prefix="/visits", tags=["visits"])
