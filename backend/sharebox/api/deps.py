"""FastAPI dependency injection: service objects from app.state."""

from __future__ import annotations

from fastapi import Request

from sharebox.config import Settings
from sharebox.services import Services
from sharebox.services.file_registry import FileRegistry
from sharebox.services.sharing import SharingService


def get_services(request: Request) -> Services:
    services = getattr(request.app.state, "services", None)
    if services is None:
        raise RuntimeError("Services not initialized: build_services() was not called")
    return services


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_sharing_service(request: Request) -> SharingService:
    return get_services(request).sharing


def get_file_registry(request: Request) -> FileRegistry:
    return get_services(request).registry
