"""Middleware de erros não tratados.

Fica na camada mais interna da pilha: a resposta 500 genérica ainda passa
pelos headers de segurança, CORS e correlation_id. Detalhes do erro ficam
apenas nos logs do servidor.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from app.constants.contact import INTERNAL_ERROR_MESSAGE

if TYPE_CHECKING:
    from starlette.middleware.base import RequestResponseEndpoint
    from starlette.requests import Request
    from starlette.responses import Response

logger = logging.getLogger(__name__)


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Converte exceções não tratadas em 500 `{success:false}`."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception(
                "unhandled_exception",
                extra={"path": request.url.path, "error_type": type(exc).__name__},
            )
            return JSONResponse(
                status_code=500,
                content={"success": False, "message": INTERNAL_ERROR_MESSAGE},
            )
