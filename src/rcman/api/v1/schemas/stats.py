# Stats request schemas.
# Created: 2026-10-18

from __future__ import annotations

from pydantic import BaseModel, Field


class CoreStatsFilterRequest(BaseModel):
    """Filter for core stats. ``group`` takes precedence over ``jobid``."""

    jobid: int | None = Field(default=None, ge=0)
    group: str | None = None


class CompletedTransfersRequest(BaseModel):
    """Filter for completed transfers."""

    group: str | None = None


class JobStatsRequest(BaseModel):
    """Stats for a single job."""

    jobid: int = Field(ge=0)
    group: str | None = None
