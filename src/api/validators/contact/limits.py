"""Limites e mensagens das regras do formulário de contato."""

from __future__ import annotations

from typing import Final

NAME_MIN_LENGTH: Final = 2
NAME_MAX_LENGTH: Final = 100
SUBJECT_MIN_LENGTH: Final = 3
SUBJECT_MAX_LENGTH: Final = 200
MESSAGE_MIN_LENGTH: Final = 10
MESSAGE_MAX_LENGTH: Final = 2000

NAME_MESSAGE: Final = (
    f"Le nom doit contenir entre {NAME_MIN_LENGTH} et {NAME_MAX_LENGTH} caractères"
)
EMAIL_MESSAGE: Final = "Email invalide"
SUBJECT_MESSAGE: Final = (
    f"Le sujet doit contenir entre {SUBJECT_MIN_LENGTH} et {SUBJECT_MAX_LENGTH} caractères"
)
MESSAGE_MESSAGE: Final = (
    f"Le message doit contenir entre {MESSAGE_MIN_LENGTH} et {MESSAGE_MAX_LENGTH} caractères"
)
TOKEN_MESSAGE: Final = "Le reCAPTCHA est requis"
