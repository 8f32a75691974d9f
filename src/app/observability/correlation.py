"""Gerenciamento de correlation_id para rastreamento de requisições.

O correlation_id vem do header `X-Correlation-Id` (ou é gerado),
é injetado em todos os logs e devolvido na resposta.
Usa ContextVar para ser async-safe.

Uso:
    token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
    try:
        # processar request
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import re
import uuid
from contextvars import ContextVar, Token

CORRELATION_ID_HEADER = "X-Correlation-Id"

# Aceita apenas ids curtos e seguros para logs
_VALID_CORRELATION_ID = re.compile(r"^[A-Za-z0-9._-]{1,128}$")

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (ou string vazia)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID a definir. Se None ou inválido, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    if correlation_id and _VALID_CORRELATION_ID.match(correlation_id):
        value = correlation_id
    else:
        value = generate_correlation_id()
    return _correlation_id.set(value)


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    """Gera um novo correlation_id (UUID v4)."""
    return str(uuid.uuid4())
