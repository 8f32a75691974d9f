"""Validators — regras de entrada aplicadas antes de qualquer IO externo.

Estrutura:
- contact/: regras do formulário de contato (comprimento, e-mail, escape HTML)
"""

__all__: list[str] = []
