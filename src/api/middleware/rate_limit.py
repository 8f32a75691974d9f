"""Rate limiting do endpoint de envio por endereço de cliente (slowapi).

Janela fixa: toda requisição POST ao endpoint conta (inclusive as que
falham na validação ou na verificação anti-abuso). Preflight OPTIONS é
respondido antes pelo CORS e não chega ao endpoint.

Respostas do endpoint levam `X-RateLimit-Limit`, `X-RateLimit-Remaining`,
`X-RateLimit-Reset` e `Retry-After`; bloqueios viram 429 com a mensagem
configurada.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi.responses import JSONResponse
from slowapi import Limiter

from app.observability import record_rate_limited

if TYPE_CHECKING:
    from collections.abc import Callable

    from slowapi.errors import RateLimitExceeded
    from starlette.requests import Request
    from starlette.responses import Response

    from config.settings import RateLimitSettings

UNKNOWN_CLIENT = "unknown"
STRATEGY = "fixed-window"
MEMORY_STORAGE_URI = "memory://"


def get_client_ip(request: Request, trust_proxy: bool = False) -> str:
    """Endereço do cliente usado como chave do limiter.

    Com trust_proxy, usa o primeiro hop de X-Forwarded-For
    (o cliente original); caso contrário, o peer do socket.
    """
    if trust_proxy:
        forwarded_for = request.headers.get("x-forwarded-for", "")
        first_hop = forwarded_for.split(",")[0].strip()
        if first_hop:
            return first_hop
    if request.client and request.client.host:
        return request.client.host
    return UNKNOWN_CLIENT


def client_ip_key(trust_proxy: bool = False) -> Callable[[Request], str]:
    """key_func do slowapi que respeita TRUST_PROXY."""

    def _key(request: Request) -> str:
        return get_client_ip(request, trust_proxy)

    return _key


def limit_value(settings: RateLimitSettings) -> str:
    """Limite no formato do `limits` (ex: "5/900 seconds")."""
    return f"{settings.max_requests}/{settings.window_seconds} seconds"


def create_limiter(trust_proxy: bool = False, storage_uri: str = MEMORY_STORAGE_URI) -> Limiter:
    """Cria o Limiter do endpoint de envio.

    Args:
        trust_proxy: Usa X-Forwarded-For como chave quando True.
        storage_uri: "memory://" (instância única) ou URL do Redis.
    """
    return Limiter(
        key_func=client_ip_key(trust_proxy),
        storage_uri=storage_uri,
        strategy=STRATEGY,
        headers_enabled=True,
    )


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> Response:
    """Responde 429 com a mensagem configurada e os headers de limite."""
    settings = request.app.state.rate_limit_settings
    response = JSONResponse(
        status_code=429,
        content={"success": False, "message": settings.message},
    )
    response = request.app.state.limiter._inject_headers(response, request.state.view_rate_limit)
    retry_after = response.headers.get("Retry-After", "0")
    record_rate_limited(request.url.path, int(retry_after) if retry_after.isdigit() else 0)
    return response
