import json

import httpx
import pytest

from rcman.rclone.client import EngineClient

RC_URL = "http://127.0.0.1:5572"


class BrokenStream(httpx.AsyncByteStream):
    """Response body that drops the connection after the first chunk."""

    async def __aiter__(self):
        yield b'{"partial": '
        raise httpx.ReadError("connection reset by peer")


class FakeRcDaemon:
    """Scripted rclone rc daemon behind an httpx.MockTransport."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._status = 200
        self._text = "{}"
        self._stream: httpx.AsyncByteStream | None = None
        self._error: Exception | None = None

    def respond(self, status_code: int, text: str) -> None:
        self._status, self._text, self._stream = status_code, text, None

    def respond_broken(self, status_code: int) -> None:
        self._status, self._stream = status_code, BrokenStream()

    def fail(self, error: Exception) -> None:
        self._error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        if self._stream is not None:
            return httpx.Response(self._status, stream=self._stream)
        return httpx.Response(self._status, text=self._text)

    @property
    def last_url(self) -> str:
        return str(self.requests[-1].url)

    @property
    def last_payload(self):
        """Decoded JSON body of the last request, or None when no body was sent."""
        content = self.requests[-1].content
        return json.loads(content) if content else None


@pytest.fixture
def rc_daemon():
    return FakeRcDaemon()


@pytest.fixture
def engine(rc_daemon):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(rc_daemon.handler))
    return EngineClient(http_client, RC_URL)
