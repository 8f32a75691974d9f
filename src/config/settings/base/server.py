"""Settings do servidor HTTP.

Porta de escuta, origem CORS permitida e confiança em proxy reverso.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_ALLOWED_ORIGIN = "http://localhost"


@dataclass(frozen=True)
class ServerSettings:
    """Configurações do servidor HTTP.

    Attributes:
        host: Interface de escuta
        port: Porta de escuta
        allowed_origin: Única origem aceita pelo CORS
        trust_proxy: Usa o primeiro hop de X-Forwarded-For como IP do cliente
    """

    host: str = "0.0.0.0"
    port: int = 3000
    allowed_origin: str = DEFAULT_ALLOWED_ORIGIN
    trust_proxy: bool = False

    def validate(self) -> list[str]:
        """Valida configurações do servidor.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if not 0 < self.port < 65536:
            errors.append(f"PORT inválida: {self.port}")

        if not self.allowed_origin:
            errors.append("ALLOWED_ORIGIN não pode ser vazio")

        return errors


def _load_server_from_env() -> ServerSettings:
    """Carrega ServerSettings de variáveis de ambiente."""
    return ServerSettings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "3000")),
        allowed_origin=os.getenv("ALLOWED_ORIGIN") or DEFAULT_ALLOWED_ORIGIN,
        trust_proxy=os.getenv("TRUST_PROXY", "").lower() in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_server_settings() -> ServerSettings:
    """Retorna instância cacheada de ServerSettings."""
    return _load_server_from_env()
