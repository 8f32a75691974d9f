"""Factories de dependências — criação de implementações concretas.

Centraliza a escolha do storage do rate limit e a montagem dos
clientes externos e do use case de contato.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.emailjs import create_emailjs_client
from api.connectors.recaptcha import create_recaptcha_client
from api.middleware.rate_limit import MEMORY_STORAGE_URI, create_limiter
from app.use_cases.contact import SendContactMessageUseCase
from config.settings import get_base_settings, get_rate_limit_settings, get_server_settings

if TYPE_CHECKING:
    from slowapi import Limiter

    from api.connectors.emailjs import EmailJSClient
    from api.connectors.recaptcha import RecaptchaClient
    from config.settings import BaseSettings, RateLimitSettings

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────────────
# Rate Limit Factory
# ──────────────────────────────────────────────────────────────────────────────


def rate_limit_storage_uri(rate_limit: RateLimitSettings, base: BaseSettings) -> str:
    """URI de storage do `limits` conforme RATE_LIMIT_BACKEND.

    - "memory": contador em memória (instância única)
    - "redis": REDIS_URL (várias instâncias compartilhando o contador)

    Raises:
        ValueError: Se backend=redis sem REDIS_URL.
    """
    if rate_limit.backend == "redis":
        if not base.redis_url:
            msg = "REDIS_URL não configurado"
            raise ValueError(msg)
        return base.redis_url
    return MEMORY_STORAGE_URI


def create_rate_limiter() -> Limiter:
    """Cria o Limiter do endpoint de envio a partir das settings."""
    base = get_base_settings()
    rate_limit = get_rate_limit_settings()

    if rate_limit.backend == "memory" and not base.is_development:
        logger.warning(
            "memory_store_in_non_dev",
            extra={"backend": "memory", "environment": base.environment},
        )
    limiter = create_limiter(
        trust_proxy=get_server_settings().trust_proxy,
        storage_uri=rate_limit_storage_uri(rate_limit, base),
    )
    logger.info("rate_limiter_created", extra={"backend": rate_limit.backend})
    return limiter


# ──────────────────────────────────────────────────────────────────────────────
# Clients & Use Cases
# ──────────────────────────────────────────────────────────────────────────────


def create_send_contact_use_case(
    abuse_check: RecaptchaClient | None = None,
    mail_client: EmailJSClient | None = None,
) -> SendContactMessageUseCase:
    """Monta o use case de envio com os clientes reais (ou injetados)."""
    return SendContactMessageUseCase(
        abuse_check=abuse_check or create_recaptcha_client(),
        mail_client=mail_client or create_emailjs_client(),
    )
