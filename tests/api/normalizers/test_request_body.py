"""Testes do parse do corpo da requisição de contato."""

from __future__ import annotations

import json

import pytest

from api.normalizers.contact import (
    MAX_BODY_BYTES,
    BodyTooLargeError,
    InvalidBodyError,
    parse_contact_body,
)
from app.constants.contact import BODY_TOO_LARGE_MESSAGE, INVALID_BODY_MESSAGE


class TestParseContactBody:
    """Testes de parse_contact_body."""

    def test_json_object(self) -> None:
        body = json.dumps({"name": "Jean", "recaptchaToken": "t"}).encode()
        assert parse_contact_body(body, "application/json") == {"name": "Jean", "recaptchaToken": "t"}

    def test_json_with_charset(self) -> None:
        body = json.dumps({"name": "Émilie"}).encode("utf-8")
        assert parse_contact_body(body, "application/json; charset=utf-8") == {"name": "Émilie"}

    def test_empty_json_body_is_empty_payload(self) -> None:
        assert parse_contact_body(b"", "application/json") == {}

    def test_malformed_json_raises(self) -> None:
        with pytest.raises(InvalidBodyError) as exc_info:
            parse_contact_body(b'{"name": ', "application/json")

        assert exc_info.value.status_code == 400
        assert exc_info.value.public_message == INVALID_BODY_MESSAGE

    @pytest.mark.parametrize("body", [b"[1, 2]", b'"texte"', b"42", b"null"])
    def test_json_not_object_raises(self, body: bytes) -> None:
        with pytest.raises(InvalidBodyError, match="payload_not_object"):
            parse_contact_body(body, "application/json")

    def test_form_urlencoded(self) -> None:
        body = b"name=Jean+Dupont&email=jean%40gmail.com&recaptchaToken="
        assert parse_contact_body(body, "application/x-www-form-urlencoded") == {
            "name": "Jean Dupont",
            "email": "jean@gmail.com",
            "recaptchaToken": "",
        }

    def test_form_repeated_key_becomes_list(self) -> None:
        payload = parse_contact_body(b"name=a&name=b", "application/x-www-form-urlencoded")
        assert payload == {"name": ["a", "b"]}

    def test_form_undecodable_raises(self) -> None:
        with pytest.raises(InvalidBodyError):
            parse_contact_body(b"name=%ff%fe", "application/x-www-form-urlencoded")

    @pytest.mark.parametrize("content_type", [None, "", "text/plain", "multipart/form-data"])
    def test_unsupported_content_type_is_empty_payload(self, content_type: str | None) -> None:
        assert parse_contact_body(b'{"name": "Jean"}', content_type) == {}

    def test_body_too_large(self) -> None:
        with pytest.raises(BodyTooLargeError) as exc_info:
            parse_contact_body(b"x" * (MAX_BODY_BYTES + 1), "application/json")

        assert exc_info.value.status_code == 413
        assert exc_info.value.public_message == BODY_TOO_LARGE_MESSAGE
