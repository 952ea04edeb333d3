from rcman.rclone.queries.stats import (
    get_completed_transfers,
    get_core_stats,
    get_core_stats_filtered,
    get_job_stats,
)

__all__ = [
    "get_completed_transfers",
    "get_core_stats",
    "get_core_stats_filtered",
    "get_job_stats",
]
