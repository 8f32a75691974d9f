"""Cliente HTTP do EmailJS (REST API de e-mail transacional).

Autentica com service_id, template_id e o par de chaves
(public_key → `user_id`, private_key → `accessToken`).
O provedor responde status + texto ("OK" em caso de sucesso).

Erros (parâmetros ausentes, status não-200, timeout, transporte)
viram EmailDispatchError; o texto do provedor nunca chega ao cliente HTTP.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.infra.http import HttpClient, HttpClientConfig, HttpError
from app.protocols.mail_dispatch import DispatchReceipt, EmailDispatchError

if TYPE_CHECKING:
    import httpx

    from app.domain.contact_submission import ContactSubmission
    from config.settings import EmailJSSettings

logger = logging.getLogger(__name__)


class EmailJSClient(HttpClient):
    """Cliente de envio via EmailJS."""

    def __init__(
        self,
        settings: EmailJSSettings,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(
            config or HttpClientConfig(timeout_seconds=settings.request_timeout_seconds),
            transport=transport,
        )
        self._settings = settings

    def _check_params(self) -> None:
        """Valida credenciais antes de qualquer chamada HTTP.

        Raises:
            EmailDispatchError: Se public_key, service_id ou template_id ausentes.
        """
        if not self._settings.public_key:
            raise EmailDispatchError("emailjs_public_key_required")
        if not self._settings.service_id:
            raise EmailDispatchError("emailjs_service_id_required")
        if not self._settings.template_id:
            raise EmailDispatchError("emailjs_template_id_required")

    def build_payload(self, submission: ContactSubmission) -> dict[str, Any]:
        """Monta o corpo JSON da chamada de envio."""
        payload: dict[str, Any] = {
            "service_id": self._settings.service_id,
            "template_id": self._settings.template_id,
            "user_id": self._settings.public_key,
            "template_params": submission.to_template_params(self._settings.recipient_email),
        }
        if self._settings.private_key:
            payload["accessToken"] = self._settings.private_key
        return payload

    async def send(self, submission: ContactSubmission) -> DispatchReceipt:
        """Envia a submissão normalizada para a caixa do operador.

        Raises:
            EmailDispatchError: Em qualquer falha do provedor.
        """
        self._check_params()
        payload = self.build_payload(submission)

        try:
            response = await self.post(self._settings.api_url, json=payload)
        except HttpError as exc:
            reason = "emailjs_timeout" if exc.is_timeout else "emailjs_transport_error"
            raise EmailDispatchError(reason) from exc

        if response.status_code != 200:
            raise EmailDispatchError(
                "emailjs_http_status",
                status_code=response.status_code,
                provider_text=response.text,
            )

        logger.debug("emailjs_send_ok", extra={"status_code": response.status_code})
        return DispatchReceipt(status_code=response.status_code, text=response.text)


def create_emailjs_client(settings: EmailJSSettings | None = None) -> EmailJSClient:
    """Factory para criar cliente EmailJS com config do ambiente."""
    from config.settings import get_emailjs_settings

    return EmailJSClient(settings or get_emailjs_settings())
