"""FastAPI application factory for the wcagscope HTTP service."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from wcagscope import __version__
from wcagscope.config import WcagScopeConfig
from wcagscope.scanner.orchestrator import ScanOrchestrator


def create_app(
    config: WcagScopeConfig | None = None,
    orchestrator: ScanOrchestrator | None = None,
) -> FastAPI:
    """Build and return the FastAPI application."""
    config = config or WcagScopeConfig.load()

    app = FastAPI(
        title="wcagscope",
        version=__version__,
        docs_url="/api/docs",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.config = config
    app.state.orchestrator = orchestrator or ScanOrchestrator.from_config(config)

    from wcagscope.web.api.audits import router as audits_router

    app.include_router(audits_router, prefix="/api")

    # Static files last so /api routes take precedence
    if config.static_dir.is_dir():
        app.mount(
            "/",
            StaticFiles(directory=str(config.static_dir), html=True),
            name="static",
        )

    return app
