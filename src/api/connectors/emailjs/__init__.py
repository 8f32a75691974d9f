"""Conector EmailJS — envio do formulário para a caixa do operador."""

from .client import EmailJSClient, create_emailjs_client

__all__ = [
    "EmailJSClient",
    "create_emailjs_client",
]
