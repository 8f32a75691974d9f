"""ContactSubmission - payload transitório do formulário de contato.

Construído a partir do corpo da requisição já validado e normalizado,
passado por valor pelo pipeline e descartado após a resposta.
Nunca persistido; o token de verificação nunca é logado.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ContactSubmission(BaseModel):
    """Submissão normalizada (trim, formato validado, HTML escapado)."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=2)
    email: str
    subject: str = Field(..., min_length=3)
    message: str = Field(..., min_length=10)
    verification_token: str = Field(..., min_length=1, repr=False)

    def to_template_params(self, recipient_email: str) -> dict[str, str]:
        """Parâmetros de template enviados ao provedor de e-mail."""
        return {
            "from_name": self.name,
            "from_email": self.email,
            "subject": self.subject,
            "message": self.message,
            "to_email": recipient_email,
        }


@dataclass(frozen=True, slots=True)
class FieldError:
    """Violação de regra em um campo do formulário."""

    field: str
    message: str

    def as_dict(self) -> dict[str, Any]:
        return {"field": self.field, "message": self.message}
