"""Testes do cliente reCAPTCHA com httpx.MockTransport."""

from __future__ import annotations

from urllib.parse import parse_qs

import httpx
import pytest

from api.connectors.recaptcha import RecaptchaClient
from app.protocols.abuse_check import VerificationOutcome
from config.settings import RECAPTCHA_VERIFY_URL, RecaptchaSettings

SETTINGS = RecaptchaSettings(secret_key="server-secret")


def _client(handler) -> RecaptchaClient:
    return RecaptchaClient(SETTINGS, transport=httpx.MockTransport(handler))


class TestRecaptchaClient:
    """Testes do RecaptchaClient.verify."""

    @pytest.mark.asyncio
    async def test_success_true_is_accepted(self) -> None:
        """success: true libera o envio; secret, token e IP vão form-encoded."""
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json={"success": True, "hostname": "localhost"})

        client = _client(handler)
        result = await client.verify("valid-token", remote_ip="203.0.113.7")
        await client.aclose()

        assert result.accepted is True
        assert result.outcome is VerificationOutcome.ACCEPTED
        assert len(captured) == 1
        request = captured[0]
        assert str(request.url) == RECAPTCHA_VERIFY_URL
        assert request.method == "POST"
        assert request.headers["content-type"] == "application/x-www-form-urlencoded"
        form = parse_qs(request.content.decode())
        assert form == {
            "secret": ["server-secret"],
            "response": ["valid-token"],
            "remoteip": ["203.0.113.7"],
        }

    @pytest.mark.asyncio
    async def test_remoteip_omitted_when_unknown(self) -> None:
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json={"success": True})

        await _client(handler).verify("tok")

        assert "remoteip" not in parse_qs(captured[0].content.decode())

    @pytest.mark.asyncio
    async def test_success_false_is_rejected_with_error_codes(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200, json={"success": False, "error-codes": ["invalid-input-response"]}
            )

        result = await _client(handler).verify("bad-token")

        assert result.accepted is False
        assert result.outcome is VerificationOutcome.REJECTED
        assert result.error_codes == ("invalid-input-response",)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{}, {"success": "true"}, {"success": 1}])
    async def test_missing_or_non_boolean_success_is_rejected(self, body: dict) -> None:
        """Somente o booleano true aceita."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=body)

        result = await _client(handler).verify("tok")

        assert result.outcome is VerificationOutcome.REJECTED

    @pytest.mark.asyncio
    async def test_non_json_response_is_unavailable(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>oops</html>")

        result = await _client(handler).verify("tok")

        assert result.accepted is False
        assert result.outcome is VerificationOutcome.UNAVAILABLE

    @pytest.mark.asyncio
    async def test_http_error_status_is_unavailable(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, json={"success": True})

        result = await _client(handler).verify("tok")

        assert result.outcome is VerificationOutcome.UNAVAILABLE

    @pytest.mark.asyncio
    async def test_timeout_is_unavailable(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        result = await _client(handler).verify("tok")

        assert result.outcome is VerificationOutcome.UNAVAILABLE

    @pytest.mark.asyncio
    async def test_transport_error_is_unavailable(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        result = await _client(handler).verify("tok")

        assert result.outcome is VerificationOutcome.UNAVAILABLE

    @pytest.mark.asyncio
    async def test_token_is_never_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"success": False})

        with caplog.at_level("DEBUG"):
            await _client(handler).verify("super-secret-token")

        assert "super-secret-token" not in caplog.text
        for record in caplog.records:
            assert "super-secret-token" not in str(record.__dict__)
