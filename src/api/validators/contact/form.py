"""Validação declarativa do formulário de contato.

Todas as regras rodam de forma independente (sem parar na primeira falha)
para que o cliente receba todas as violações de uma vez.

Cada regra:
1. Converte o valor bruto em texto (números viram texto; ausente, lista
   ou objeto → "")
2. Aplica trim (exceto no token de verificação)
3. Verifica comprimento/formato
4. Escapa HTML nos campos de texto livre
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from api.validators.contact.email_address import is_valid_email, normalize_email
from api.validators.contact.limits import (
    EMAIL_MESSAGE,
    MESSAGE_MAX_LENGTH,
    MESSAGE_MESSAGE,
    MESSAGE_MIN_LENGTH,
    NAME_MAX_LENGTH,
    NAME_MESSAGE,
    NAME_MIN_LENGTH,
    SUBJECT_MAX_LENGTH,
    SUBJECT_MESSAGE,
    SUBJECT_MIN_LENGTH,
    TOKEN_MESSAGE,
)
from api.validators.contact.sanitize import escape_html, text_length
from app.domain.contact_submission import ContactSubmission, FieldError

# Sanitizer: recebe o valor bruto em texto, devolve o valor normalizado
# ou None quando a regra falha.
Sanitizer = Callable[[str], str | None]


@dataclass(frozen=True, slots=True)
class FieldRule:
    """Regra de um campo: nome no payload, mensagem de erro e sanitizer."""

    field: str
    message: str
    sanitize: Sanitizer


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Submissão normalizada ou lista de erros por campo."""

    submission: ContactSubmission | None
    errors: tuple[FieldError, ...] = ()

    @property
    def is_valid(self) -> bool:
        return self.submission is not None and not self.errors

    def errors_as_dicts(self) -> list[dict[str, Any]]:
        return [error.as_dict() for error in self.errors]


def _free_text(min_length: int, max_length: int) -> Sanitizer:
    def _sanitize(value: str) -> str | None:
        trimmed = value.strip()
        if not min_length <= text_length(trimmed) <= max_length:
            return None
        return escape_html(trimmed)

    return _sanitize


def _email(value: str) -> str | None:
    trimmed = value.strip()
    if not is_valid_email(trimmed):
        return None
    return normalize_email(trimmed)


def _required(value: str) -> str | None:
    return value if value else None


CONTACT_FORM_RULES: tuple[FieldRule, ...] = (
    FieldRule("name", NAME_MESSAGE, _free_text(NAME_MIN_LENGTH, NAME_MAX_LENGTH)),
    FieldRule("email", EMAIL_MESSAGE, _email),
    FieldRule("subject", SUBJECT_MESSAGE, _free_text(SUBJECT_MIN_LENGTH, SUBJECT_MAX_LENGTH)),
    FieldRule("message", MESSAGE_MESSAGE, _free_text(MESSAGE_MIN_LENGTH, MESSAGE_MAX_LENGTH)),
    FieldRule("recaptchaToken", TOKEN_MESSAGE, _required),
)


def _as_text(value: Any) -> str:
    # Escalares viram texto; ausentes, listas e objetos contam como vazios
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float):
        return str(value)
    return ""


def validate_contact_form(
    payload: Mapping[str, Any],
    rules: tuple[FieldRule, ...] = CONTACT_FORM_RULES,
) -> ValidationResult:
    """Aplica todas as regras ao payload bruto.

    Args:
        payload: Corpo da requisição já parseado (JSON ou form).
        rules: Regras a aplicar (padrão: CONTACT_FORM_RULES).

    Returns:
        ValidationResult com a submissão normalizada ou todos os erros.
    """
    cleaned: dict[str, str] = {}
    errors: list[FieldError] = []

    for rule in rules:
        value = rule.sanitize(_as_text(payload.get(rule.field)))
        if value is None:
            errors.append(FieldError(field=rule.field, message=rule.message))
        else:
            cleaned[rule.field] = value

    if errors:
        return ValidationResult(submission=None, errors=tuple(errors))

    submission = ContactSubmission(
        name=cleaned["name"],
        email=cleaned["email"],
        subject=cleaned["subject"],
        message=cleaned["message"],
        verification_token=cleaned["recaptchaToken"],
    )
    return ValidationResult(submission=submission)
