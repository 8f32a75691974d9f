"""Normalizers — conversão do corpo HTTP para payloads internos.

Estrutura:
- contact/: corpo JSON ou form-urlencoded do formulário de contato
"""

__all__: list[str] = []
