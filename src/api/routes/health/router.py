"""Endpoints de status do serviço (sem chamadas externas)."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter
from pydantic import BaseModel

from app.constants.contact import ROOT_MESSAGE

router = APIRouter()


class RootResponse(BaseModel):
    """Resposta da rota raiz."""

    status: str
    message: str


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    timestamp: str


@router.get("/", response_model=RootResponse)
async def root() -> RootResponse:
    """Indica que o serviço está no ar."""
    return RootResponse(status="ok", message=ROOT_MESSAGE)


@router.get("/api/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — nunca consulta reCAPTCHA, EmailJS ou Redis."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(UTC).isoformat(),
    )
