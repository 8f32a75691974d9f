"""Settings específicas do EmailJS.

Configurações do provedor de e-mail transacional (REST API).
Template e layout da mensagem ficam no painel do provedor.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

EMAILJS_API_URL: str = "https://api.emailjs.com/api/v1.0/email/send"
DEFAULT_RECIPIENT_EMAIL: str = "alannhoffmann86@gmail.com"


@dataclass(frozen=True)
class EmailJSSettings:
    """Configurações do EmailJS.

    Attributes:
        service_id: ID do serviço de envio
        template_id: ID do template
        public_key: Chave pública (user_id na API)
        private_key: Chave privada (accessToken na API)
        recipient_email: Caixa do operador que recebe as mensagens
        api_url: Endpoint de envio
        request_timeout_seconds: Timeout da chamada de envio
    """

    service_id: str = ""
    template_id: str = ""
    public_key: str = ""
    private_key: str = ""
    recipient_email: str = DEFAULT_RECIPIENT_EMAIL
    api_url: str = EMAILJS_API_URL
    request_timeout_seconds: float = 30.0

    def validate(self) -> list[str]:
        """Valida configurações mínimas do EmailJS.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.service_id:
            errors.append("EMAILJS_SERVICE_ID não configurado")

        if not self.template_id:
            errors.append("EMAILJS_TEMPLATE_ID não configurado")

        if not self.public_key:
            errors.append("EMAILJS_PUBLIC_KEY não configurado")

        if not self.private_key:
            errors.append("EMAILJS_PRIVATE_KEY não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("EMAILJS_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> EmailJSSettings:
    """Carrega EmailJSSettings de variáveis de ambiente."""
    return EmailJSSettings(
        service_id=os.getenv("EMAILJS_SERVICE_ID", ""),
        template_id=os.getenv("EMAILJS_TEMPLATE_ID", ""),
        public_key=os.getenv("EMAILJS_PUBLIC_KEY", ""),
        private_key=os.getenv("EMAILJS_PRIVATE_KEY", ""),
        recipient_email=os.getenv("RECIPIENT_EMAIL") or DEFAULT_RECIPIENT_EMAIL,
        api_url=os.getenv("EMAILJS_API_URL", EMAILJS_API_URL),
        request_timeout_seconds=float(os.getenv("EMAILJS_TIMEOUT_SECONDS", "30")),
    )


@lru_cache(maxsize=1)
def get_emailjs_settings() -> EmailJSSettings:
    """Retorna instância cacheada de EmailJSSettings."""
    return _load_from_env()
