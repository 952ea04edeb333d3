# Windows extended-length path normalization for transfer records.
# Created: 2026-10-18

from __future__ import annotations

import sys
from typing import Any

_EXTENDED_PREFIXES = ("//?/", "\\\\?\\")
_TRANSFER_PATH_FIELDS = ("dstFs", "srcFs")


def is_windows() -> bool:
    """True when running on a platform with drive-letter filesystem roots."""
    return sys.platform == "win32"


def normalize_windows_path(path: str, windows: bool) -> str:
    """Strip a leading ``//?/`` or ``\\\\?\\`` from *path* when *windows* is set.

    ``//?/C:/data`` becomes ``C:/data``. Anything else is returned unchanged.
    """
    if not windows:
        return path
    for prefix in _EXTENDED_PREFIXES:
        if path.startswith(prefix):
            return path[len(prefix):]
    return path


def normalize_transfer_paths(value: Any, windows: bool) -> Any:
    """Normalize ``transferred[*].dstFs`` and ``srcFs`` in place and return *value*.

    Missing fields, non-string fields and non-object entries are left alone.
    """
    if not windows or not isinstance(value, dict):
        return value

    transferred = value.get("transferred")
    if not isinstance(transferred, list):
        return value

    for transfer in transferred:
        if not isinstance(transfer, dict):
            continue
        for field in _TRANSFER_PATH_FIELDS:
            fs_value = transfer.get(field)
            if isinstance(fs_value, str):
                transfer[field] = normalize_windows_path(fs_value, windows)
    return value
