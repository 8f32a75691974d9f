"""Agregador de settings do contact relay.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    DEFAULT_ALLOWED_ORIGIN,
    RATE_LIMIT_MESSAGE,
    BaseSettings,
    Environment,
    RateLimitBackend,
    RateLimitSettings,
    ServerSettings,
    get_base_settings,
    get_rate_limit_settings,
    get_server_settings,
)

# Provider-specific settings
from config.settings.emailjs import (
    DEFAULT_RECIPIENT_EMAIL,
    EMAILJS_API_URL,
    EmailJSSettings,
    get_emailjs_settings,
)
from config.settings.recaptcha import (
    RECAPTCHA_VERIFY_URL,
    RecaptchaSettings,
    get_recaptcha_settings,
)

__all__ = [
    # Constants
    "DEFAULT_ALLOWED_ORIGIN",
    "DEFAULT_RECIPIENT_EMAIL",
    "EMAILJS_API_URL",
    "RATE_LIMIT_MESSAGE",
    "RECAPTCHA_VERIFY_URL",
    # Base
    "BaseSettings",
    # Providers
    "EmailJSSettings",
    "Environment",
    "RateLimitBackend",
    "RateLimitSettings",
    "RecaptchaSettings",
    "ServerSettings",
    "get_base_settings",
    "get_emailjs_settings",
    "get_rate_limit_settings",
    "get_recaptcha_settings",
    "get_server_settings",
]
