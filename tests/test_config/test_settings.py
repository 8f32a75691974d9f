"""Testes das settings e da validação de runtime."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from app.bootstrap import collect_settings_errors, validate_runtime_settings
from config.settings import (
    DEFAULT_ALLOWED_ORIGIN,
    DEFAULT_RECIPIENT_EMAIL,
    BaseSettings,
    EmailJSSettings,
    RateLimitSettings,
    RecaptchaSettings,
    ServerSettings,
    get_base_settings,
    get_emailjs_settings,
    get_rate_limit_settings,
    get_recaptcha_settings,
    get_server_settings,
)

_GETTERS = (
    get_base_settings,
    get_server_settings,
    get_rate_limit_settings,
    get_recaptcha_settings,
    get_emailjs_settings,
)

_SECRETS = {
    "RECAPTCHA_SECRET_KEY": "secret",
    "EMAILJS_SERVICE_ID": "service",
    "EMAILJS_TEMPLATE_ID": "template",
    "EMAILJS_PUBLIC_KEY": "public",
    "EMAILJS_PRIVATE_KEY": "private",
}


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """Ambiente sem variáveis do serviço e caches zerados."""
    for name in (
        "ENVIRONMENT",
        "PORT",
        "ALLOWED_ORIGIN",
        "TRUST_PROXY",
        "REDIS_URL",
        "RECIPIENT_EMAIL",
        "RATE_LIMIT_BACKEND",
        "RATE_LIMIT_MAX_REQUESTS",
        "RATE_LIMIT_WINDOW_SECONDS",
        *_SECRETS,
    ):
        monkeypatch.delenv(name, raising=False)
    for getter in _GETTERS:
        getter.cache_clear()
    yield monkeypatch
    for getter in _GETTERS:
        getter.cache_clear()


class TestDefaults:
    def test_server_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        settings = get_server_settings()

        assert settings.port == 3000
        assert settings.allowed_origin == DEFAULT_ALLOWED_ORIGIN == "http://localhost"
        assert settings.trust_proxy is False

    def test_rate_limit_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        settings = get_rate_limit_settings()

        assert settings.window_seconds == 15 * 60
        assert settings.max_requests == 5
        assert settings.backend == "memory"

    def test_recipient_defaults_to_operator(self, clean_env: pytest.MonkeyPatch) -> None:
        assert get_emailjs_settings().recipient_email == DEFAULT_RECIPIENT_EMAIL

    def test_environment_from_env(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("ENVIRONMENT", "prod")
        assert get_base_settings().environment == "production"
        assert get_base_settings().is_production is True


class TestFromEnvironment:
    def test_overrides(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("PORT", "8080")
        clean_env.setenv("ALLOWED_ORIGIN", "https://portfolio.fr")
        clean_env.setenv("TRUST_PROXY", "true")
        clean_env.setenv("RECIPIENT_EMAIL", "moi@portfolio.fr")

        server = get_server_settings()
        assert server.port == 8080
        assert server.allowed_origin == "https://portfolio.fr"
        assert server.trust_proxy is True
        assert get_emailjs_settings().recipient_email == "moi@portfolio.fr"


class TestValidate:
    def test_recaptcha_requires_secret(self) -> None:
        assert RecaptchaSettings().validate() == ["RECAPTCHA_SECRET_KEY não configurado"]
        assert RecaptchaSettings(secret_key="s").validate() == []

    def test_emailjs_requires_all_keys(self) -> None:
        assert len(EmailJSSettings().validate()) == 4
        assert EmailJSSettings(
            service_id="s", template_id="t", public_key="p", private_key="k"
        ).validate() == []

    def test_redis_backend_requires_url(self) -> None:
        errors = RateLimitSettings(backend="redis").validate(BaseSettings())
        assert errors == ["RATE_LIMIT_BACKEND=redis requer REDIS_URL configurado"]

    def test_rate_limit_bounds(self) -> None:
        errors = RateLimitSettings(window_seconds=0, max_requests=0).validate(BaseSettings())
        assert len(errors) == 2

    def test_server_port_bounds(self) -> None:
        assert ServerSettings(port=0).validate() == ["PORT inválida: 0"]


class TestValidateRuntimeSettings:
    def test_development_only_warns(
        self, clean_env: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level("WARNING"):
            validate_runtime_settings()

        assert any(r.getMessage() == "settings_validation_failed" for r in caplog.records)

    @pytest.mark.parametrize("environment", ["staging", "production"])
    def test_strict_environments_raise(
        self, clean_env: pytest.MonkeyPatch, environment: str
    ) -> None:
        clean_env.setenv("ENVIRONMENT", environment)

        with pytest.raises(RuntimeError, match="RECAPTCHA_SECRET_KEY"):
            validate_runtime_settings()

    def test_complete_production_config_passes(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("ENVIRONMENT", "production")
        for name, value in _SECRETS.items():
            clean_env.setenv(name, value)

        assert collect_settings_errors() == []
        validate_runtime_settings()
