# rclone remote-control endpoint paths and URL helper.
# Created: 2026-10-18
#
# Paths are relative to the rc base URL.

from __future__ import annotations


class core:  # noqa: N801
    """Paths under the ``core/`` rc namespace."""

    STATS = "core/stats"
    TRANSFERRED = "core/transferred"


def build_url(base: str, endpoint: str) -> str:
    """Join the rc base address and an endpoint path with exactly one slash."""
    return f"{base.rstrip('/')}/{endpoint.lstrip('/')}"
