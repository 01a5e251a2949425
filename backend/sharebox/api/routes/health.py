"""Health check."""

from fastapi import APIRouter, Depends

from sharebox import __version__
from sharebox.api.deps import get_file_registry
from sharebox.schemas.system import HealthResponse
from sharebox.services.file_registry import FileRegistry

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(registry: FileRegistry = Depends(get_file_registry)):
    """Lightweight connectivity check."""
    return HealthResponse(version=__version__, files=len(registry))


@router.get("/ping")
async def ping():
    """Ultra-lightweight ping."""
    return {"status": "ok"}
