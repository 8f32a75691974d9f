"""Middlewares HTTP — cortes transversais aplicados antes das rotas.

- CorrelationIdMiddleware: correlation_id por requisição
- SecurityHeadersMiddleware: headers de hardening
- UnhandledErrorMiddleware: 500 genérico dentro da pilha
- rate_limit: Limiter (slowapi) do endpoint de envio
"""

from .correlation import CorrelationIdMiddleware
from .errors import UnhandledErrorMiddleware
from .rate_limit import (
    create_limiter,
    get_client_ip,
    limit_value,
    rate_limit_exceeded_handler,
)
from .security_headers import SECURITY_HEADERS, SecurityHeadersMiddleware

__all__ = [
    "SECURITY_HEADERS",
    "CorrelationIdMiddleware",
    "SecurityHeadersMiddleware",
    "UnhandledErrorMiddleware",
    "create_limiter",
    "get_client_ip",
    "limit_value",
    "rate_limit_exceeded_handler",
]
