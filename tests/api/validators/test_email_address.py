"""Testes de validação e normalização de e-mail."""

from __future__ import annotations

import pytest

from api.validators.contact.email_address import is_valid_email, normalize_email


class TestIsValidEmail:
    @pytest.mark.parametrize(
        "address",
        ["jean@gmail.com", "contact@portfolio.fr", "a.b-c+d@sub.domaine.org"],
    )
    def test_valid(self, address: str) -> None:
        assert is_valid_email(address) is True

    @pytest.mark.parametrize(
        "address",
        ["", "jean", "jean@", "@gmail.com", "jean@@gmail.com", "jean dupont@gmail.com"],
    )
    def test_invalid(self, address: str) -> None:
        assert is_valid_email(address) is False


class TestNormalizeEmail:
    @pytest.mark.parametrize(
        ("address", "expected"),
        [
            ("Jean.Dupont@Gmail.com", "jeandupont@gmail.com"),
            ("jean.dupont+portfolio@gmail.com", "jeandupont@gmail.com"),
            ("j.d@googlemail.com", "jd@gmail.com"),
            ("Jean.Dupont+x@Outlook.com", "jean.dupont@outlook.com"),
            ("Jean+tag@icloud.com", "jean@icloud.com"),
            ("Jean-Alias@yahoo.fr", "jean@yahoo.fr"),
            ("Jean@yandex.com", "jean@yandex.ru"),
            ("Jean.Dupont+x@Portfolio.FR", "jean.dupont+x@portfolio.fr"),
        ],
    )
    def test_provider_rules(self, address: str, expected: str) -> None:
        assert normalize_email(address) == expected

    def test_empty_local_part_after_subaddress_is_none(self) -> None:
        assert normalize_email("+tag@gmail.com") is None
