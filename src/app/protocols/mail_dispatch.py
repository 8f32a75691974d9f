"""Protocolo do envio de e-mail transacional."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.contact_submission import ContactSubmission


class EmailDispatchError(Exception):
    """Falha no envio pelo provedor (erro, timeout ou transporte).

    O texto do provedor fica apenas nos logs do servidor.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        provider_text: str = "",
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.provider_text = provider_text


@dataclass(frozen=True, slots=True)
class DispatchReceipt:
    """Confirmação do provedor."""

    status_code: int
    text: str


class MailDispatchClientProtocol(Protocol):
    """Contrato mínimo para o cliente de envio de e-mail."""

    async def send(self, submission: ContactSubmission) -> DispatchReceipt: ...
