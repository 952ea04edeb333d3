# Tests for the shared rclone EngineClient.

import httpx
import pytest

from rcman.config import Settings
from rcman.rclone.client import EngineClient
from rcman.rclone.errors import (
    EngineError,
    EngineHTTPStatusError,
    EngineParseError,
    EngineTransportError,
)


class TestPostJson:
    async def test_no_payload_sends_no_body(self, engine, rc_daemon):
        rc_daemon.respond(200, '{"ok": true}')

        result = await engine.post_json("core/stats", action="get core stats", subject="core stats")

        assert result == {"ok": True}
        assert rc_daemon.last_url == "http://127.0.0.1:5572/core/stats"
        assert rc_daemon.requests[-1].method == "POST"
        assert rc_daemon.requests[-1].content == b""

    async def test_payload_sent_as_json(self, engine, rc_daemon):
        await engine.post_json("core/stats", {"group": "g"}, action="a", subject="s")

        assert rc_daemon.last_payload == {"group": "g"}
        assert rc_daemon.requests[-1].headers["content-type"] == "application/json"

    async def test_empty_payload_still_sent(self, engine, rc_daemon):
        await engine.post_json("core/stats", {}, action="a", subject="s")

        assert rc_daemon.last_payload == {}

    async def test_transport_error(self, engine, rc_daemon):
        rc_daemon.fail(httpx.ConnectError("connection refused"))

        with pytest.raises(EngineTransportError) as exc_info:
            await engine.post_json("core/stats", action="get core stats", subject="core stats")

        assert str(exc_info.value) == "Failed to get core stats: connection refused"
        assert isinstance(exc_info.value.cause, httpx.ConnectError)

    async def test_http_status_error_keeps_full_body(self, engine, rc_daemon):
        body = '{"error": "' + "x" * 5000 + '", "status": 500}'
        rc_daemon.respond(500, body)

        with pytest.raises(EngineHTTPStatusError) as exc_info:
            await engine.post_json("core/stats", action="a", subject="s")

        err = exc_info.value
        assert err.status_code == 500
        assert err.body == body
        assert str(err) == f"HTTP 500: {body}"

    async def test_parse_error(self, engine, rc_daemon):
        rc_daemon.respond(200, "<html>not json</html>")

        with pytest.raises(EngineParseError) as exc_info:
            await engine.post_json("core/stats", action="get job stats", subject="job stats")

        assert str(exc_info.value).startswith("Failed to parse job stats: ")

    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    async def test_non_standard_json_constants_rejected(self, engine, rc_daemon, constant):
        rc_daemon.respond(200, '{"speed": %s}' % constant)

        with pytest.raises(EngineParseError) as exc_info:
            await engine.post_json("core/stats", action="a", subject="core stats")

        assert constant in str(exc_info.value)

    async def test_body_dropped_on_error_status_is_empty(self, engine, rc_daemon):
        rc_daemon.respond_broken(500)

        with pytest.raises(EngineHTTPStatusError) as exc_info:
            await engine.post_json("core/stats", action="get core stats", subject="core stats")

        assert exc_info.value.status_code == 500
        assert exc_info.value.body == ""
        assert str(exc_info.value) == "HTTP 500: "

    async def test_body_dropped_on_success_is_parse_error(self, engine, rc_daemon):
        rc_daemon.respond_broken(200)

        with pytest.raises(EngineParseError) as exc_info:
            await engine.post_json("core/stats", action="get core stats", subject="core stats")

        assert str(exc_info.value).startswith("Failed to parse core stats: ")

    async def test_all_errors_share_base(self, engine, rc_daemon):
        rc_daemon.fail(httpx.ReadTimeout("timed out"))

        with pytest.raises(EngineError):
            await engine.post_json("core/stats", action="a", subject="s")


class TestFromSettings:
    async def test_uses_engine_api_url(self):
        settings = Settings(rclone_api_host="10.0.0.2", rclone_api_port=5599)
        client = EngineClient.from_settings(settings)
        try:
            assert client.api_url == "http://10.0.0.2:5599"
            assert client.url_for("core/stats") == "http://10.0.0.2:5599/core/stats"
        finally:
            await client.aclose()

    async def test_basic_auth_configured(self):
        settings = Settings(rclone_rc_user="admin", rclone_rc_pass="secret")
        client = EngineClient.from_settings(settings)
        try:
            assert isinstance(client._http.auth, httpx.BasicAuth)
        finally:
            await client.aclose()

    async def test_no_auth_by_default(self):
        client = EngineClient.from_settings(Settings())
        try:
            assert client._http.auth is None
        finally:
            await client.aclose()

    async def test_aclose(self, engine):
        await engine.aclose()
        assert engine._http.is_closed
