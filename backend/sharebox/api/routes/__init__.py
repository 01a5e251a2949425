"""API route registration."""

from fastapi import APIRouter

from sharebox.api.routes import auth, files, health, uploads

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(auth.router, tags=["auth"])
api_router.include_router(files.router, tags=["files"])

uploads_router = uploads.router

__all__ = ["api_router", "uploads_router"]
