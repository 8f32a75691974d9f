"""Protocolo da verificação anti-abuso (prova de presença humana)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Protocol


class VerificationOutcome(StrEnum):
    """Resultado da verificação do token."""

    ACCEPTED = "accepted"
    REJECTED = "rejected"  # serviço respondeu success != true
    UNAVAILABLE = "unavailable"  # transporte, timeout, status ou JSON inválido


@dataclass(frozen=True, slots=True)
class VerificationResult:
    """Resultado da chamada ao serviço de verificação.

    Apenas ACCEPTED permite seguir no pipeline; REJECTED e UNAVAILABLE
    são tratados igualmente como rejeição, distintos apenas nos logs.
    """

    outcome: VerificationOutcome
    error_codes: tuple[str, ...] = field(default_factory=tuple)

    @property
    def accepted(self) -> bool:
        return self.outcome is VerificationOutcome.ACCEPTED


class AbuseCheckClientProtocol(Protocol):
    """Contrato mínimo para o cliente de verificação anti-abuso."""

    async def verify(self, token: str, remote_ip: str | None = None) -> VerificationResult: ...
