# rclone Engine Client: shared HTTP handle for the rc API.
# Created: 2026-10-18
#
# One EngineClient (and one httpx.AsyncClient) is created at app startup and
# passed to every query. Queries never mutate it.

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from rcman.config import Settings, get_settings
from rcman.rclone.endpoints import build_url
from rcman.rclone.errors import EngineHTTPStatusError, EngineParseError, EngineTransportError

logger = logging.getLogger(__name__)


class EngineClient:
    """POSTs JSON to the rclone rc API and decodes the reply.

    Each call is a single attempt: no retries, no backoff.
    """

    def __init__(self, http_client: httpx.AsyncClient, api_url: str):
        self._http = http_client
        self.api_url = api_url

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> EngineClient:
        """Build a client (and its shared httpx.AsyncClient) from configuration."""
        settings = settings or get_settings()
        auth = None
        if settings.rclone_rc_user:
            auth = httpx.BasicAuth(settings.rclone_rc_user, settings.rclone_rc_pass or "")
        http_client = httpx.AsyncClient(timeout=settings.rclone_request_timeout, auth=auth)
        return cls(http_client, settings.engine_api_url)

    async def aclose(self) -> None:
        await self._http.aclose()

    def url_for(self, endpoint: str) -> str:
        return build_url(self.api_url, endpoint)

    async def post_json(
        self,
        endpoint: str,
        payload: dict[str, Any] | None = None,
        *,
        action: str,
        subject: str,
    ) -> Any:
        """POST *payload* to *endpoint* and return the decoded JSON reply.

        Args:
            endpoint: rc path, e.g. ``core/stats``.
            payload: JSON body. ``None`` sends no body at all.
            action: Verb phrase for transport errors ("get core stats").
            subject: Noun phrase for parse errors ("core stats").

        Raises:
            EngineTransportError: The request could not be sent.
            EngineHTTPStatusError: The daemon replied with a non-2xx status.
            EngineParseError: The reply body was not JSON.
        """
        url = self.url_for(endpoint)
        if payload is None:
            request = self._http.build_request("POST", url)
        else:
            request = self._http.build_request("POST", url, json=payload)

        try:
            response = await self._http.send(request, stream=True)
        except httpx.HTTPError as e:
            logger.error("Failed to %s: %s", action, e)
            raise EngineTransportError(action, e) from e

        try:
            status = response.status_code
            body = await _read_body(response)
        finally:
            await response.aclose()

        if not response.is_success:
            logger.error("HTTP error trying to %s: %s - %s", action, status, body)
            raise EngineHTTPStatusError(status, body)

        logger.debug("%s response: %s", subject, body)
        try:
            return json.loads(body, parse_constant=_reject_constant)
        except ValueError as e:
            logger.error("Failed to parse %s: %s", subject, e)
            raise EngineParseError(subject, e) from e


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name}")


async def _read_body(response: httpx.Response) -> str:
    """Return the response text, or an empty string if the body can't be read."""
    try:
        await response.aread()
        return response.text
    except (httpx.HTTPError, httpx.StreamError) as e:
        logger.warning("Could not read rclone response body: %s", e)
        return ""
