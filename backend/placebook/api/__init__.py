"""API router aggregator."""
from fastapi import APIRouter

from placebook.api.routes import auth, locations, meta

api_router = APIRouter()
api_router.include_router(meta.router)
api_router.include_router(auth.router)
api_router.include_router(locations.router)

__all__ = ["api_router"]
