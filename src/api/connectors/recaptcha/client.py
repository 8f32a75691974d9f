"""Cliente HTTP do Google reCAPTCHA (siteverify).

Envia `secret` e `response` form-encoded e interpreta o campo booleano
`success`. Qualquer coisa diferente de `success: true` é rejeição:
- success false/ausente → REJECTED
- timeout, falha de transporte, status não-2xx ou JSON inválido → UNAVAILABLE

Sem retry: uma tentativa rejeitada consome uma unidade do rate limit.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from app.infra.http import HttpClient, HttpClientConfig, HttpError
from app.protocols.abuse_check import VerificationOutcome, VerificationResult
from config.logging import log_provider_failure

if TYPE_CHECKING:
    import httpx

    from config.settings import RecaptchaSettings

logger = logging.getLogger(__name__)

PROVIDER = "recaptcha"


class RecaptchaClient(HttpClient):
    """Cliente de verificação de token reCAPTCHA."""

    def __init__(
        self,
        settings: RecaptchaSettings,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(
            config or HttpClientConfig(timeout_seconds=settings.request_timeout_seconds),
            transport=transport,
        )
        self._settings = settings

    async def verify(self, token: str, remote_ip: str | None = None) -> VerificationResult:
        """Verifica o token junto ao serviço.

        Args:
            token: Token enviado pelo cliente (nunca logado)
            remote_ip: IP do cliente, repassado como `remoteip` quando conhecido

        Returns:
            VerificationResult (apenas ACCEPTED libera o envio)
        """
        form: dict[str, str] = {
            "secret": self._settings.secret_key,
            "response": token,
        }
        if remote_ip:
            form["remoteip"] = remote_ip

        started_at = time.perf_counter()
        try:
            response = await self.post(self._settings.verify_url, data=form)
        except HttpError as exc:
            log_provider_failure(
                logger,
                PROVIDER,
                reason="timeout" if exc.is_timeout else "transport_error",
                elapsed_ms=(time.perf_counter() - started_at) * 1000,
            )
            return VerificationResult(outcome=VerificationOutcome.UNAVAILABLE)

        elapsed_ms = (time.perf_counter() - started_at) * 1000
        if not response.is_success:
            log_provider_failure(
                logger,
                PROVIDER,
                reason="http_status",
                status_code=response.status_code,
                elapsed_ms=elapsed_ms,
            )
            return VerificationResult(outcome=VerificationOutcome.UNAVAILABLE)

        data = _parse_json(response)
        if data is None:
            log_provider_failure(logger, PROVIDER, reason="invalid_json", elapsed_ms=elapsed_ms)
            return VerificationResult(outcome=VerificationOutcome.UNAVAILABLE)

        error_codes = _error_codes(data)
        if data.get("success") is True:
            logger.info(
                "recaptcha_verified",
                extra={"provider": PROVIDER, "elapsed_ms": round(elapsed_ms, 2)},
            )
            return VerificationResult(outcome=VerificationOutcome.ACCEPTED)

        logger.warning(
            "recaptcha_rejected",
            extra={"provider": PROVIDER, "error_codes": list(error_codes)},
        )
        return VerificationResult(outcome=VerificationOutcome.REJECTED, error_codes=error_codes)


def _parse_json(response: httpx.Response) -> dict[str, Any] | None:
    try:
        data = response.json()
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


def _error_codes(data: dict[str, Any]) -> tuple[str, ...]:
    raw = data.get("error-codes")
    if not isinstance(raw, list):
        return ()
    return tuple(str(code) for code in raw)


def create_recaptcha_client(settings: RecaptchaSettings | None = None) -> RecaptchaClient:
    """Factory para criar cliente reCAPTCHA com config do ambiente."""
    from config.settings import get_recaptcha_settings

    return RecaptchaClient(settings or get_recaptcha_settings())
