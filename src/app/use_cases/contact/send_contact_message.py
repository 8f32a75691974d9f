"""Use case de envio do formulário de contato.

Pipeline linear:
    received → validated → abuse_checked → sent → responded

Cada etapa devolve sucesso ou erro tipado; o primeiro erro encerra o fluxo
e vira exatamente uma resposta JSON. Nenhuma etapa faz retry.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from api.validators.contact import validate_contact_form
from app.constants.contact import (
    DISPATCH_FAILED_MESSAGE,
    RECAPTCHA_FAILED_MESSAGE,
    SEND_SUCCESS_MESSAGE,
)
from app.domain.contact_pipeline import FailureKind, PipelineStage, SendContactResult
from app.observability import record_latency, record_outcome
from app.protocols.mail_dispatch import EmailDispatchError

if TYPE_CHECKING:
    from app.protocols.abuse_check import AbuseCheckClientProtocol
    from app.protocols.mail_dispatch import MailDispatchClientProtocol

logger = logging.getLogger(__name__)

COMPONENT = "contact"


class SendContactMessageUseCase:
    """Orquestra validação, verificação anti-abuso e envio do e-mail."""

    def __init__(
        self,
        abuse_check: AbuseCheckClientProtocol,
        mail_client: MailDispatchClientProtocol,
    ) -> None:
        self._abuse_check = abuse_check
        self._mail_client = mail_client

    async def execute(
        self,
        payload: Mapping[str, Any],
        remote_ip: str | None = None,
    ) -> SendContactResult:
        """Executa o pipeline para um corpo de requisição já parseado.

        Args:
            payload: Campos brutos do formulário
            remote_ip: IP do cliente (repassado à verificação anti-abuso)

        Returns:
            SendContactResult com status e corpo da resposta.
        """
        started_at = time.perf_counter()
        result = await self._run(payload, remote_ip)

        record_latency(COMPONENT, "send", (time.perf_counter() - started_at) * 1000)
        record_outcome(
            COMPONENT,
            result.failure.value if result.failure else "sent",
            status_code=result.status_code,
        )
        return result

    async def _run(
        self,
        payload: Mapping[str, Any],
        remote_ip: str | None,
    ) -> SendContactResult:
        validation = validate_contact_form(payload)
        if not validation.is_valid or validation.submission is None:
            logger.info(
                "contact_validation_failed",
                extra={"fields": [error.field for error in validation.errors]},
            )
            return SendContactResult(
                status_code=400,
                body={"success": False, "errors": validation.errors_as_dicts()},
                last_stage=PipelineStage.RECEIVED,
                failure=FailureKind.VALIDATION_ERROR,
            )

        submission = validation.submission
        verification = await self._abuse_check.verify(
            submission.verification_token,
            remote_ip=remote_ip,
        )
        if not verification.accepted:
            logger.info(
                "contact_abuse_check_failed",
                extra={
                    "outcome": verification.outcome.value,
                    "error_codes": list(verification.error_codes),
                },
            )
            return SendContactResult(
                status_code=400,
                body={"success": False, "message": RECAPTCHA_FAILED_MESSAGE},
                last_stage=PipelineStage.VALIDATED,
                failure=FailureKind.ABUSE_REJECTED,
            )

        try:
            receipt = await self._mail_client.send(submission)
        except EmailDispatchError as exc:
            logger.error(
                "contact_dispatch_failed",
                extra={
                    "error": str(exc),
                    "provider_status": exc.status_code,
                    "provider_text": exc.provider_text,
                },
            )
            return SendContactResult(
                status_code=500,
                body={"success": False, "message": DISPATCH_FAILED_MESSAGE},
                last_stage=PipelineStage.ABUSE_CHECKED,
                failure=FailureKind.DISPATCH_FAILURE,
            )

        logger.info(
            "contact_sent",
            extra={"provider_status": receipt.status_code, "provider_text": receipt.text},
        )
        return SendContactResult(
            status_code=200,
            body={"success": True, "message": SEND_SUCCESS_MESSAGE},
            last_stage=PipelineStage.SENT,
        )

    async def aclose(self) -> None:
        """Fecha os clientes HTTP que expõem aclose()."""
        for client in (self._abuse_check, self._mail_client):
            close = getattr(client, "aclose", None)
            if callable(close):
                await close()
