"""Rotas HTTP da API — adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (status, envio de contato)
- Parse inicial do corpo da requisição
- Delegação para use_cases
- Respostas JSON uniformes

Estrutura:
- routes/health/: GET / e GET /api/health
- routes/contact/: POST /api/send-email

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
