"""Settings de rate limiting do endpoint de envio.

Janela fixa por endereço de cliente, contador em memória ou Redis.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

RateLimitBackend = Literal["memory", "redis"]

RATE_LIMIT_MESSAGE = "Trop de tentatives d'envoi. Veuillez réessayer dans 15 minutes."


@dataclass(frozen=True)
class RateLimitSettings:
    """Configurações de rate limiting.

    Attributes:
        backend: Backend do contador (memory|redis)
        window_seconds: Duração da janela de contagem
        max_requests: Máximo de requisições por janela e cliente
        message: Mensagem devolvida ao cliente quando bloqueado
    """

    backend: RateLimitBackend = "memory"
    window_seconds: int = 900  # 15 min
    max_requests: int = 5
    message: str = RATE_LIMIT_MESSAGE

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida configurações de rate limiting.

        Args:
            base: BaseSettings para verificar Redis.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.backend not in ("memory", "redis"):
            errors.append(f"RATE_LIMIT_BACKEND inválido: {self.backend}")

        if self.backend == "redis" and not base.redis_url:
            errors.append("RATE_LIMIT_BACKEND=redis requer REDIS_URL configurado")

        if self.window_seconds <= 0:
            errors.append("RATE_LIMIT_WINDOW_SECONDS deve ser > 0")

        if self.max_requests < 1:
            errors.append("RATE_LIMIT_MAX_REQUESTS deve ser >= 1")

        return errors


def _load_rate_limit_from_env() -> RateLimitSettings:
    """Carrega RateLimitSettings de variáveis de ambiente."""
    backend_str = os.getenv("RATE_LIMIT_BACKEND", "memory").lower()
    backend: RateLimitBackend = "redis" if backend_str == "redis" else "memory"
    return RateLimitSettings(
        backend=backend,
        window_seconds=int(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "900")),
        max_requests=int(os.getenv("RATE_LIMIT_MAX_REQUESTS", "5")),
    )


@lru_cache(maxsize=1)
def get_rate_limit_settings() -> RateLimitSettings:
    """Retorna instância cacheada de RateLimitSettings."""
    return _load_rate_limit_from_env()
