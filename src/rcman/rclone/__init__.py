# rclone remote-control integration.
# Created: 2026-10-18

from rcman.rclone.client import EngineClient
from rcman.rclone.errors import (
    EngineError,
    EngineHTTPStatusError,
    EngineParseError,
    EngineTransportError,
)

__all__ = [
    "EngineClient",
    "EngineError",
    "EngineHTTPStatusError",
    "EngineParseError",
    "EngineTransportError",
]
