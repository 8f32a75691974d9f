"""Cliente HTTP base para conectores externos.

Uma única tentativa por chamada: falhas de transporte e timeouts viram
HttpError (sem dados sensíveis), status HTTP é devolvido ao conector para
interpretação. O AsyncClient é criado sob demanda e fechado no shutdown.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        is_timeout: bool = False,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.is_timeout = is_timeout


class HttpClient:
    """Cliente HTTP assíncrono simples, sem retry."""

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                verify=self._config.verify_ssl,
                timeout=self._config.timeout_seconds,
                headers=self._config.default_headers,
                transport=self._transport,
            )
        return self._client

    async def post(
        self,
        url: str,
        *,
        json: dict[str, Any] | None = None,
        data: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Executa POST único (JSON ou form-encoded).

        Raises:
            HttpError: Em timeout, falha de transporte ou URL inválida.
        """
        try:
            return await self._get_client().post(url, json=json, data=data, headers=headers)
        except httpx.TimeoutException as exc:
            raise HttpError("http_timeout", is_timeout=True) from exc
        except httpx.HTTPError as exc:
            raise HttpError("http_transport_error") from exc
        except httpx.InvalidURL as exc:
            raise HttpError("http_invalid_url") from exc

    async def aclose(self) -> None:
        """Fecha o AsyncClient subjacente (idempotente)."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("http_client_closed")
        self._client = None
