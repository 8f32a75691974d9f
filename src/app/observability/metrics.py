"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e podem ser agregadas
posteriormente (Cloud Logging, CloudWatch Insights, etc.).

Métricas suportadas:
- Latência: tempo de execução por componente/operação
- Outcome: contador de resultados do envio de contato (sent, abuse_rejected...)
- Rate limit: contador de requisições bloqueadas

Uso:
    from app.observability import record_latency, record_outcome

    start = time.perf_counter()
    # ... operação ...
    record_latency("contact", "send", (time.perf_counter() - start) * 1000)
    record_outcome("contact", "sent")
"""

from __future__ import annotations

import logging

from app.observability.correlation import get_correlation_id

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "contact", "recaptcha")
        operation: Nome da operação (ex: "send", "verify")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação (default: do contexto atual)
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id or get_correlation_id(),
        },
    )


def record_outcome(
    component: str,
    outcome: str,
    status_code: int | None = None,
    correlation_id: str | None = None,
) -> None:
    """Registra resultado de um fluxo.

    Args:
        component: Nome do componente (ex: "contact")
        outcome: Resultado (ex: "sent", "validation_error", "dispatch_failure")
        status_code: Status HTTP devolvido ao cliente
        correlation_id: ID de correlação (default: do contexto atual)
    """
    extra: dict[str, str | int | None] = {
        "metric_type": "outcome",
        "component": component,
        "outcome": outcome,
        "correlation_id": correlation_id or get_correlation_id(),
    }
    if status_code is not None:
        extra["status_code"] = status_code

    logger.info("metric_outcome", extra=extra)


def record_rate_limited(path: str, retry_after_seconds: int) -> None:
    """Registra requisição bloqueada pelo rate limit (sem IP do cliente)."""
    logger.info(
        "metric_rate_limited",
        extra={
            "metric_type": "rate_limited",
            "component": "rate_limit",
            "path": path,
            "retry_after_seconds": retry_after_seconds,
            "correlation_id": get_correlation_id(),
        },
    )
