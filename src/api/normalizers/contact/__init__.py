"""Normalizer do formulário de contato — corpo HTTP → payload dict."""

from api.normalizers.contact.request_body import (
    MAX_BODY_BYTES,
    BodyTooLargeError,
    InvalidBodyError,
    parse_contact_body,
)

__all__ = [
    "MAX_BODY_BYTES",
    "BodyTooLargeError",
    "InvalidBodyError",
    "parse_contact_body",
]
