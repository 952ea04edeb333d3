# Shared FastAPI dependencies for the API layer.
# Created: 2026-10-18

from __future__ import annotations

from fastapi import HTTPException, Request

from rcman.rclone.client import EngineClient


def get_engine_client(request: Request) -> EngineClient:
    """Return the shared EngineClient created by the app lifespan.

    Tests swap it out through ``app.dependency_overrides``.
    """
    client = getattr(request.app.state, "engine_client", None)
    if client is None:
        raise HTTPException(status_code=503, detail="rclone engine client is not initialized")
    return client
