"""Agregador de rotas — registra os routers do serviço.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router(limiter, rate_limit_settings))
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter

from api.routes.contact.router import create_contact_router
from api.routes.health.router import router as health_router

if TYPE_CHECKING:
    from slowapi import Limiter

    from config.settings import RateLimitSettings


def create_api_router(limiter: Limiter, rate_limit: RateLimitSettings) -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Args:
        limiter: Limiter aplicado ao endpoint de envio.
        rate_limit: Limite e janela do endpoint de envio.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Status (/ e /api/health)
    api_router.include_router(health_router, tags=["health"])

    # Formulário de contato
    api_router.include_router(create_contact_router(limiter, rate_limit), tags=["contact"])

    return api_router
