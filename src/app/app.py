"""Entrypoint da aplicação contact relay.

Este módulo é o ponto de entrada principal do serviço.
Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 3000

Uso (desenvolvimento):
    contact-relay
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.middleware import (
    CorrelationIdMiddleware,
    SecurityHeadersMiddleware,
    UnhandledErrorMiddleware,
    rate_limit_exceeded_handler,
)
from api.routes import create_api_router
from app.bootstrap import (
    get_send_contact_use_case,
    initialize_app,
    validate_runtime_settings,
)
from app.bootstrap.dependencies import create_rate_limiter
from app.constants.contact import NOT_FOUND_MESSAGE
from app.observability import CORRELATION_ID_HEADER
from config.logging import get_logger
from config.settings import get_base_settings, get_rate_limit_settings, get_server_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from slowapi import Limiter

    from app.use_cases.contact import SendContactMessageUseCase

# Inicializar logging e .env ANTES de qualquer leitura de settings
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações (estrito em staging/production)
    - Monta o use case de envio (se não injetado)

    Shutdown:
    - Fecha clientes HTTP gracefully
    """
    service_name = get_base_settings().service_name
    logger.info("app_starting", extra={"service_name": service_name})
    validate_runtime_settings()

    if getattr(app.state, "send_contact_use_case", None) is None:
        app.state.send_contact_use_case = get_send_contact_use_case()

    yield

    logger.info("app_shutting_down", extra={"service_name": service_name})
    use_case = getattr(app.state, "send_contact_use_case", None)
    if use_case is not None:
        await use_case.aclose()


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Rotas registradas são explícitas; método não suportado também é "rota não encontrada"
    if exc.status_code in (404, 405):
        return JSONResponse(
            status_code=404,
            content={"success": False, "message": NOT_FOUND_MESSAGE},
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


def create_app(
    send_contact_use_case: SendContactMessageUseCase | None = None,
    limiter: Limiter | None = None,
) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        send_contact_use_case: Use case injetado (default: montado no startup)
        limiter: Limiter do endpoint de envio (default: conforme RATE_LIMIT_BACKEND)

    Returns:
        Aplicação FastAPI configurada.
    """
    server_settings = get_server_settings()
    rate_limit = get_rate_limit_settings()
    limiter = limiter or create_rate_limiter()

    fastapi_app = FastAPI(
        title="contact-relay",
        description="Relay do formulário de contato do portfolio (reCAPTCHA + EmailJS)",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    fastapi_app.state.send_contact_use_case = send_contact_use_case
    fastapi_app.state.limiter = limiter
    fastapi_app.state.rate_limit_settings = rate_limit

    # Ordem de execução (externo → interno):
    # CorrelationId → SecurityHeaders → CORS → UnhandledError → rotas
    fastapi_app.add_middleware(UnhandledErrorMiddleware)
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=[server_settings.allowed_origin],
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type", CORRELATION_ID_HEADER],
        expose_headers=[
            CORRELATION_ID_HEADER,
            "X-RateLimit-Limit",
            "X-RateLimit-Remaining",
            "X-RateLimit-Reset",
            "Retry-After",
        ],
    )
    fastapi_app.add_middleware(SecurityHeadersMiddleware)
    fastapi_app.add_middleware(CorrelationIdMiddleware)

    fastapi_app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    fastapi_app.add_exception_handler(StarletteHTTPException, _http_exception_handler)

    # Registra todas as rotas
    fastapi_app.include_router(create_api_router(limiter, rate_limit))

    logger.info(
        "app_configured",
        extra={"allowed_origin": server_settings.allowed_origin},
    )

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta."""
    import uvicorn

    server_settings = get_server_settings()
    rate_limit = get_rate_limit_settings()

    logger.info(
        "Contact relay listening on port %s",
        server_settings.port,
        extra={
            "url": f"http://localhost:{server_settings.port}",
            "allowed_origin": server_settings.allowed_origin,
            "rate_limit_max_requests": rate_limit.max_requests,
            "rate_limit_window_minutes": rate_limit.window_seconds // 60,
        },
    )
    uvicorn.run(
        "app.app:app",
        host=server_settings.host,
        port=server_settings.port,
        server_header=False,
        log_config=None,
    )


if __name__ == "__main__":
    main()
