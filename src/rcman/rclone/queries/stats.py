# rclone stats queries: core/stats and core/transferred.
# Created: 2026-10-18

from __future__ import annotations

import logging
from typing import Any

from rcman.rclone.client import EngineClient
from rcman.rclone.endpoints import core
from rcman.rclone.paths import is_windows, normalize_transfer_paths

logger = logging.getLogger(__name__)


async def get_core_stats(client: EngineClient) -> Any:
    """Get global rclone core statistics."""
    return await client.post_json(core.STATS, action="get core stats", subject="core stats")


async def get_core_stats_filtered(
    client: EngineClient,
    jobid: int | None = None,
    group: str | None = None,
) -> Any:
    """Get core statistics scoped to a group or job.

    ``group`` wins over ``jobid``; a bare ``jobid`` is queried as the
    ``job/<jobid>`` group. With neither, global stats are returned.
    """
    payload: dict[str, Any] = {}

    if group is not None:
        payload["group"] = group
        logger.debug("Getting core stats for group: %s", group)
    elif jobid is not None:
        payload["group"] = f"job/{jobid}"
        logger.debug("Getting core stats for job: %s", jobid)
    else:
        logger.debug("Getting global core stats")

    logger.debug(
        "Requesting core stats from %s with payload %s", client.url_for(core.STATS), payload
    )

    return await client.post_json(
        core.STATS,
        payload,
        action="get filtered core stats",
        subject="filtered core stats",
    )


async def get_completed_transfers(
    client: EngineClient,
    group: str | None = None,
    *,
    windows_paths: bool | None = None,
) -> Any:
    """Get completed transfers from ``core/transferred``.

    Args:
        client: Shared engine client.
        group: Restrict to one stats group (optional).
        windows_paths: Strip extended-length prefixes from ``srcFs``/``dstFs``.
            ``None`` means "only on Windows".

    Returns:
        The daemon's JSON document, with transfer paths normalized.
    """
    payload: dict[str, Any] = {}
    if group is not None:
        payload["group"] = group
        logger.debug("Getting completed transfers for group: %s", group)
    else:
        logger.debug("Getting all completed transfers")

    logger.debug(
        "Requesting completed transfers from %s with payload %s",
        client.url_for(core.TRANSFERRED),
        payload,
    )

    value = await client.post_json(
        core.TRANSFERRED,
        payload,
        action="get completed transfers",
        subject="completed transfers",
    )

    if windows_paths is None:
        windows_paths = is_windows()
    if windows_paths:
        logger.debug("Normalizing paths in completed transfers")
        normalize_transfer_paths(value, windows=True)

    return value


async def get_job_stats(client: EngineClient, jobid: int, group: str | None = None) -> Any:
    """Get stats for one job, optionally narrowed to a group."""
    payload: dict[str, Any] = {"jobid": jobid}
    if group is not None:
        payload["group"] = group

    return await client.post_json(
        core.STATS,
        payload,
        action="get job stats",
        subject="job stats",
    )
