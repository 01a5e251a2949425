"""ShareBox FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from sharebox import __version__
from sharebox.config import Settings, get_settings
from sharebox.exceptions import ShareBoxError
from sharebox.services import build_services

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    """Startup / shutdown lifecycle."""
    settings: Settings = app.state.settings
    _setup_logging(settings)

    logger.info(
        "ShareBox v%s started: listening on %s:%s (admin: %s)",
        __version__, settings.host, settings.port, settings.admin_email,
    )
    try:
        yield
    finally:
        logger.info("ShareBox shutting down (%d files in registry dropped)", len(app.state.services.registry))


def _setup_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    for noisy in ("multipart", "python_multipart"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


async def _sharebox_error_handler(request: Request, exc: ShareBoxError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def create_app(settings: Settings | None = None) -> FastAPI:
    """Application factory."""
    from sharebox.api.routes import api_router, uploads_router

    settings = settings or get_settings()
    Path(settings.data_dir).mkdir(parents=True, exist_ok=True)

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        debug=settings.debug,
        lifespan=_lifespan,
    )
    app.state.settings = settings
    app.state.services = build_services(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(ShareBoxError, _sharebox_error_handler)

    app.include_router(api_router, prefix=settings.api_prefix)
    app.include_router(uploads_router, prefix=settings.uploads_prefix, tags=["uploads"])

    # Serve the web client from static_dir; mounted last so API routes win
    static_dir = Path(settings.static_dir)
    if static_dir.is_dir() and (static_dir / "index.html").exists():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="frontend")
        logger.info("Frontend mounted from %s", static_dir)
    else:
        logger.info("No frontend found at %s, API-only mode", static_dir)

    return app


def run(**kwargs: Any) -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "sharebox.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=settings.uvicorn_workers,
        log_level=settings.log_level.lower(),
        **kwargs,
    )


if __name__ == "__main__":
    run()
