"""Estados e resultado do pipeline de envio de contato.

Received → Validated → AbuseChecked → Sent → Responded, com saída de erro
de qualquer estado direto para Responded.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class PipelineStage(StrEnum):
    """Estados do pipeline de envio."""

    RECEIVED = "received"
    VALIDATED = "validated"
    ABUSE_CHECKED = "abuse_checked"
    SENT = "sent"
    RESPONDED = "responded"


class FailureKind(StrEnum):
    """Saídas de erro do pipeline."""

    VALIDATION_ERROR = "validation_error"
    ABUSE_REJECTED = "abuse_rejected"
    DISPATCH_FAILURE = "dispatch_failure"


@dataclass(frozen=True, slots=True)
class SendContactResult:
    """Resposta terminal do pipeline (sempre um único JSON).

    Attributes:
        status_code: Status HTTP da resposta
        body: Corpo JSON da resposta
        last_stage: Último estado alcançado antes de responder
        failure: Tipo de falha (None em caso de sucesso)
    """

    status_code: int
    body: dict[str, Any]
    last_stage: PipelineStage
    failure: FailureKind | None = None

    @property
    def success(self) -> bool:
        return self.failure is None
