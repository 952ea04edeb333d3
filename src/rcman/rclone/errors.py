# Errors raised by the rclone engine client.
# Created: 2026-10-18
#
# str(error) is the message shown to the user as-is.

from __future__ import annotations


class EngineError(Exception):
    """Base class for failures talking to the rclone rc API."""


class EngineTransportError(EngineError):
    """The request never produced a response (connect, DNS, timeout...)."""

    def __init__(self, action: str, cause: Exception):
        self.action = action
        self.cause = cause
        super().__init__(f"Failed to {action}: {cause}")


class EngineHTTPStatusError(EngineError):
    """The daemon answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code}: {body}")


class EngineParseError(EngineError):
    """The daemon answered 2xx but the body was not valid JSON."""

    def __init__(self, subject: str, cause: Exception):
        self.subject = subject
        self.cause = cause
        super().__init__(f"Failed to parse {subject}: {cause}")
