"""Parse do corpo da requisição de contato (JSON ou form URL-encoded).

Corpo malformado falha aqui, antes de chegar ao validator.
Content-Type desconhecido ou ausente resulta em payload vazio
(todas as regras do validator falham em seguida).
"""

from __future__ import annotations

import json
from typing import Any, Final
from urllib.parse import parse_qs

from app.constants.contact import BODY_TOO_LARGE_MESSAGE, INVALID_BODY_MESSAGE

# Limite de corpo aceito (mesma ordem de grandeza de parsers HTTP usuais)
MAX_BODY_BYTES: Final = 100 * 1024

JSON_MEDIA_TYPE: Final = "application/json"
FORM_MEDIA_TYPE: Final = "application/x-www-form-urlencoded"


class InvalidBodyError(ValueError):
    """Corpo da requisição não pôde ser parseado."""

    status_code = 400
    public_message = INVALID_BODY_MESSAGE


class BodyTooLargeError(InvalidBodyError):
    """Corpo da requisição excede MAX_BODY_BYTES."""

    status_code = 413
    public_message = BODY_TOO_LARGE_MESSAGE


def _media_type(content_type: str | None) -> tuple[str, str]:
    """Separa media type e charset do header Content-Type."""
    if not content_type:
        return "", "utf-8"
    media_type, _, params = content_type.partition(";")
    charset = "utf-8"
    for param in params.split(";"):
        key, _, value = param.strip().partition("=")
        if key.lower() == "charset" and value:
            charset = value.strip('"').lower()
    return media_type.strip().lower(), charset


def _parse_json(raw_body: bytes, charset: str) -> dict[str, Any]:
    if not raw_body.strip():
        return {}
    try:
        payload = json.loads(raw_body.decode(charset))
    except (UnicodeDecodeError, LookupError) as exc:
        raise InvalidBodyError("invalid_encoding") from exc
    except json.JSONDecodeError as exc:
        raise InvalidBodyError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidBodyError("payload_not_object")
    return payload


def _parse_form(raw_body: bytes, charset: str) -> dict[str, Any]:
    try:
        text = raw_body.decode(charset)
        parsed = parse_qs(text, keep_blank_values=True, encoding=charset, errors="strict")
    except (UnicodeDecodeError, LookupError) as exc:
        raise InvalidBodyError("invalid_encoding") from exc

    # Chave repetida vira lista (não-texto → regra do campo falha)
    return {key: values[0] if len(values) == 1 else values for key, values in parsed.items()}


def parse_contact_body(raw_body: bytes, content_type: str | None) -> dict[str, Any]:
    """Parseia o corpo bruto conforme o Content-Type.

    Args:
        raw_body: Corpo bruto da requisição
        content_type: Valor do header Content-Type

    Raises:
        BodyTooLargeError: Se o corpo exceder MAX_BODY_BYTES
        InvalidBodyError: Se JSON/form estiver malformado ou JSON não for objeto

    Returns:
        Payload como dict (vazio para Content-Type não suportado)
    """
    if len(raw_body) > MAX_BODY_BYTES:
        raise BodyTooLargeError("body_too_large")

    media_type, charset = _media_type(content_type)

    if media_type == JSON_MEDIA_TYPE or media_type.endswith("+json"):
        return _parse_json(raw_body, charset)

    if media_type == FORM_MEDIA_TYPE:
        return _parse_form(raw_body, charset)

    return {}
