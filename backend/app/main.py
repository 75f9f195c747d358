"""Application entry point."""

from __future__ import annotations

import logging
from pathlib import Path

import pytz
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .api import api_router, health_router
from .core.config import Settings, get_settings
from .core.errors import NotFoundError, not_found_handler
from .core.logging import RequestIDMiddleware, init_logging
from .services import PipelineStore, seed_demo_data

logger = logging.getLogger(__name__)


def build_store(config: Settings) -> PipelineStore:
    """Create the process-wide store, seeded when configured to."""
    store = PipelineStore(tz=pytz.timezone(config.TZ))
    if config.SEED_DEMO_DATA:
        seed_demo_data(store)
    return store


def create_app(
    config: Settings | None = None, store: PipelineStore | None = None
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Settings to use instead of the environment.
        store: Store to serve instead of a freshly built one.
    """
    config = config or get_settings()
    init_logging(config.LOG_LEVEL)

    app = FastAPI(title="ATS Pipeline")
    app.state.store = store if store is not None else build_store(config)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.include_router(health_router)
    app.include_router(api_router, prefix=config.API_PREFIX)

    if config.STATIC_DIR and Path(config.STATIC_DIR).is_dir():
        app.mount(
            "/", StaticFiles(directory=config.STATIC_DIR, html=True), name="static"
        )
    return app


def run() -> None:
    """Serve the module-level application with uvicorn."""
    config = get_settings()
    logger.info("ATS server starting on port %s", config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT)


app = create_app()
