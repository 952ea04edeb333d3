# Stats router: rclone core stats, job stats, completed transfers.
# Created: 2026-10-18
#
# Thin proxies over rcman.rclone.queries.stats. Engine failures come back as
# 502 with the display message in ``detail``.

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from rcman.api.deps import get_engine_client
from rcman.api.v1.schemas.common import ErrorResponse
from rcman.api.v1.schemas.stats import (
    CompletedTransfersRequest,
    CoreStatsFilterRequest,
    JobStatsRequest,
)
from rcman.rclone.client import EngineClient
from rcman.rclone.errors import EngineError
from rcman.rclone.queries import stats as queries

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Stats"], responses={502: {"model": ErrorResponse}})


def _bad_gateway(e: EngineError) -> HTTPException:
    return HTTPException(status_code=502, detail=str(e))


@router.post("/rclone/core/stats")
async def get_core_stats(client: EngineClient = Depends(get_engine_client)) -> Any:
    """Get global rclone core statistics."""
    try:
        return await queries.get_core_stats(client)
    except EngineError as e:
        raise _bad_gateway(e) from e


@router.post("/rclone/core/stats/filtered")
async def get_core_stats_filtered(
    body: CoreStatsFilterRequest | None = None,
    client: EngineClient = Depends(get_engine_client),
) -> Any:
    """Get core statistics for a group or job (global when neither is given)."""
    body = body or CoreStatsFilterRequest()
    try:
        return await queries.get_core_stats_filtered(client, jobid=body.jobid, group=body.group)
    except EngineError as e:
        raise _bad_gateway(e) from e


@router.post("/rclone/core/transferred")
async def get_completed_transfers(
    body: CompletedTransfersRequest | None = None,
    client: EngineClient = Depends(get_engine_client),
) -> Any:
    """Get completed transfers, optionally for one group."""
    body = body or CompletedTransfersRequest()
    try:
        return await queries.get_completed_transfers(client, group=body.group)
    except EngineError as e:
        raise _bad_gateway(e) from e


@router.post("/rclone/job/stats")
async def get_job_stats(
    body: JobStatsRequest,
    client: EngineClient = Depends(get_engine_client),
) -> Any:
    """Get stats for a single job."""
    try:
        return await queries.get_job_stats(client, jobid=body.jobid, group=body.group)
    except EngineError as e:
        raise _bad_gateway(e) from e
