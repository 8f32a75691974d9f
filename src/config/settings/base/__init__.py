"""Agregador de settings base.

Re-exporta todas as settings base para uso externo.
"""

from __future__ import annotations

from config.settings.base.core import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.base.rate_limit import (
    RATE_LIMIT_MESSAGE,
    RateLimitBackend,
    RateLimitSettings,
    get_rate_limit_settings,
)
from config.settings.base.server import (
    DEFAULT_ALLOWED_ORIGIN,
    ServerSettings,
    get_server_settings,
)

__all__ = [
    "DEFAULT_ALLOWED_ORIGIN",
    "RATE_LIMIT_MESSAGE",
    # Core
    "BaseSettings",
    # Types
    "Environment",
    "RateLimitBackend",
    # Rate limit
    "RateLimitSettings",
    # Server
    "ServerSettings",
    "get_base_settings",
    "get_rate_limit_settings",
    "get_server_settings",
]
