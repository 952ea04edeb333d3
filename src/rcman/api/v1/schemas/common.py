# Common API response schemas.
# Created: 2026-10-18

from __future__ import annotations

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error envelope."""

    detail: str
