"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: carrega `.env`, configura logging,
valida settings e conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_send_contact_use_case

    # Na inicialização do serviço
    initialize_app()

    # Obter use case
    use_case = get_send_contact_use_case()
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_emailjs_settings,
    get_rate_limit_settings,
    get_recaptcha_settings,
    get_server_settings,
)

if TYPE_CHECKING:
    from app.use_cases.contact import SendContactMessageUseCase

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação com todas as configurações necessárias.

    Deve ser chamada uma vez no início do serviço, antes de qualquer
    leitura de settings (o `.env` precisa estar carregado).

    Configura:
    - Variáveis do `.env` (sem sobrescrever o ambiente real)
    - Logging estruturado JSON com correlation_id
    """
    load_dotenv(override=False)
    base = get_base_settings()

    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def collect_settings_errors() -> list[str]:
    """Agrega erros de validação de todas as settings, prefixados por domínio."""
    base = get_base_settings()
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"server: {error}" for error in get_server_settings().validate())
    errors.extend(f"rate_limit: {error}" for error in get_rate_limit_settings().validate(base))
    errors.extend(f"recaptcha: {error}" for error in get_recaptcha_settings().validate())
    errors.extend(f"emailjs: {error}" for error in get_emailjs_settings().validate())
    return errors


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local
    (a falha aparece na primeira requisição que precisar do segredo).

    Raises:
        RuntimeError: Se houver erros em ambiente estrito.
    """
    environment = get_base_settings().environment
    strict_mode = environment in STRICT_VALIDATION_ENVS
    errors = collect_settings_errors()

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


# ──────────────────────────────────────────────────────────────────────────────
# Getters (lazy initialization com cache)
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_send_contact_use_case() -> SendContactMessageUseCase:
    """Obtém use case de envio de contato (singleton)."""
    from app.bootstrap.dependencies import create_send_contact_use_case

    return create_send_contact_use_case()
