"""Endpoint de envio do formulário de contato.

Endpoints:
- POST /api/send-email: valida, verifica reCAPTCHA e envia via EmailJS

Fluxo:
1. Rate limit (slowapi) conta a requisição antes do handler
2. Corpo JSON ou form-urlencoded é parseado (inválido → 400)
3. Use case executa o pipeline e devolve status + corpo JSON
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter

from api.middleware import get_client_ip, limit_value
from api.normalizers.contact import InvalidBodyError, parse_contact_body
from app.use_cases.contact import SendContactMessageUseCase
from config.settings import RateLimitSettings, get_server_settings

logger = logging.getLogger(__name__)

SEND_EMAIL_PATH = "/api/send-email"


def get_send_contact_use_case(request: Request) -> SendContactMessageUseCase:
    """Obtém o use case montado no startup (fallback: bootstrap lazy)."""
    use_case = getattr(request.app.state, "send_contact_use_case", None)
    if use_case is None:
        from app.bootstrap import get_send_contact_use_case as build_use_case

        use_case = build_use_case()
    return use_case


async def send_email(
    request: Request,
    use_case: SendContactMessageUseCase = Depends(get_send_contact_use_case),
) -> JSONResponse:
    """Recebe o formulário e responde com um único JSON."""
    raw_body = await request.body()
    try:
        payload = parse_contact_body(raw_body, request.headers.get("content-type"))
    except InvalidBodyError as exc:
        logger.info("contact_body_rejected", extra={"reason": str(exc)})
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": exc.public_message},
        )

    remote_ip = get_client_ip(request, get_server_settings().trust_proxy)
    result = await use_case.execute(payload, remote_ip=remote_ip)
    return JSONResponse(status_code=result.status_code, content=result.body)


def create_contact_router(limiter: Limiter, rate_limit: RateLimitSettings) -> APIRouter:
    """Registra o endpoint de envio com o limite da aplicação."""
    router = APIRouter()
    router.add_api_route(
        SEND_EMAIL_PATH,
        limiter.limit(limit_value(rate_limit))(send_email),
        methods=["POST"],
    )
    return router
