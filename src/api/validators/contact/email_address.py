"""Validação e normalização de endereços de e-mail.

Sintaxe verificada com `email-validator` (sem consulta DNS).
Normalização canônica por provedor:
- Gmail/Googlemail: minúsculas, remove pontos e subendereço (+tag)
- Outlook/Hotmail/Live, iCloud: minúsculas, remove subendereço (+tag)
- Yahoo: minúsculas, remove subendereço (-tag)
- Yandex: minúsculas, domínio canônico yandex.ru
- Demais: parte local em minúsculas
"""

from __future__ import annotations

from typing import Final

from email_validator import EmailNotValidError, validate_email

_GMAIL_DOMAINS: Final = frozenset({"gmail.com", "googlemail.com"})
_ICLOUD_DOMAINS: Final = frozenset({"icloud.com", "me.com"})
_OUTLOOK_DOMAINS: Final = frozenset(
    {
        "hotmail.com",
        "hotmail.co.uk",
        "hotmail.fr",
        "hotmail.de",
        "hotmail.es",
        "hotmail.it",
        "hotmail.be",
        "hotmail.ca",
        "hotmail.com.br",
        "live.com",
        "live.fr",
        "live.be",
        "live.co.uk",
        "live.de",
        "live.nl",
        "msn.com",
        "outlook.com",
        "outlook.fr",
        "outlook.be",
        "outlook.de",
        "outlook.es",
        "outlook.it",
        "outlook.com.br",
        "passport.com",
    }
)
_YAHOO_DOMAINS: Final = frozenset(
    {
        "rocketmail.com",
        "yahoo.ca",
        "yahoo.co.uk",
        "yahoo.com",
        "yahoo.de",
        "yahoo.fr",
        "yahoo.in",
        "yahoo.it",
        "ymail.com",
    }
)
_YANDEX_DOMAINS: Final = frozenset(
    {"yandex.ru", "yandex.ua", "yandex.kz", "yandex.com", "yandex.by", "ya.ru"}
)


def is_valid_email(address: str) -> bool:
    """Retorna True se o endereço tem sintaxe de e-mail válida."""
    if not address:
        return False
    try:
        validate_email(address, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def normalize_email(address: str) -> str | None:
    """Canonicaliza o endereço (caixa e aliases por provedor).

    Args:
        address: Endereço já validado sintaticamente.

    Returns:
        Endereço canônico, ou None se a parte local ficar vazia
        após remover o subendereço (ex: "+tag@gmail.com").
    """
    local, _, domain = address.rpartition("@")
    if not local:
        return None
    domain = domain.lower()

    if domain in _GMAIL_DOMAINS:
        local = local.split("+", 1)[0].replace(".", "").lower()
        domain = "gmail.com"
    elif domain in _ICLOUD_DOMAINS or domain in _OUTLOOK_DOMAINS:
        local = local.split("+", 1)[0].lower()
    elif domain in _YAHOO_DOMAINS:
        parts = local.split("-")
        local = ("-".join(parts[:-1]) if len(parts) > 1 else parts[0]).lower()
    elif domain in _YANDEX_DOMAINS:
        local = local.lower()
        domain = "yandex.ru"
    else:
        local = local.lower()

    if not local:
        return None
    return f"{local}@{domain}"
