"""API server for ``rcman serve``.

Starts the versioned ``/api/v1/`` routers with CORS for the desktop client and
owns the shared rclone EngineClient for the lifetime of the app.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

logger = logging.getLogger(__name__)

_BUILTIN_ORIGINS = [
    "tauri://localhost",
    "http://tauri.localhost",
    "http://localhost:1420",
]


@asynccontextmanager
async def _lifespan(app):
    from rcman.config import get_settings
    from rcman.rclone.client import EngineClient

    settings = get_settings()
    client = EngineClient.from_settings(settings)
    app.state.engine_client = client
    logger.info("Using rclone rc API at %s", client.api_url)
    try:
        yield
    finally:
        await client.aclose()
        app.state.engine_client = None


def create_api_app():
    """Build the FastAPI application with all v1 API routers."""
    from fastapi import FastAPI
    from fastapi.middleware.cors import CORSMiddleware

    from rcman.api.v1 import mount_v1_routers
    from rcman.config import get_settings

    app = FastAPI(
        title="rcman API",
        description="Desktop backend for the rclone remote-control daemon.",
        version="1.0.0",
        docs_url="/api/v1/docs",
        redoc_url="/api/v1/redoc",
        openapi_url="/api/v1/openapi.json",
        lifespan=_lifespan,
    )

    # --- CORS -----------------------------------------------------------
    origins = sorted(set(_BUILTIN_ORIGINS + get_settings().api_cors_allowed_origins))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_origin_regex=r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
    )

    # --- Mount all /api/v1/ routers -------------------------------------
    mount_v1_routers(app)

    return app


def run_api_server(
    host: str = "127.0.0.1",
    port: int = 8899,
    dev: bool = False,
) -> None:
    """Start the API server under uvicorn."""
    import uvicorn

    logger.info("API docs: http://%s:%s/api/v1/docs", host, port)

    if dev:
        import pathlib

        src_dir = str(pathlib.Path(__file__).resolve().parent.parent)
        uvicorn.run(
            "rcman.api.serve:create_api_app",
            factory=True,
            host=host,
            port=port,
            reload=True,
            reload_dirs=[src_dir],
            reload_includes=["*.py"],
            log_level="debug",
        )
    else:
        app = create_api_app()
        uvicorn.run(app, host=host, port=port)
