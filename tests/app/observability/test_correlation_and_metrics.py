"""Testes de correlation_id e métricas estruturadas."""

from __future__ import annotations

import pytest

from app.observability import (
    get_correlation_id,
    record_latency,
    record_outcome,
    reset_correlation_id,
    set_correlation_id,
)


class TestCorrelationId:
    def test_set_and_reset(self) -> None:
        token = set_correlation_id("abc-123")
        try:
            assert get_correlation_id() == "abc-123"
        finally:
            reset_correlation_id(token)
        assert get_correlation_id() == ""

    @pytest.mark.parametrize("value", [None, "", "a b", "x" * 200])
    def test_invalid_values_generate_uuid(self, value: str | None) -> None:
        token = set_correlation_id(value)
        try:
            generated = get_correlation_id()
            assert generated != value
            assert len(generated) == 36
        finally:
            reset_correlation_id(token)


class TestMetrics:
    def test_record_latency_uses_context_correlation_id(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        token = set_correlation_id("metric-1")
        try:
            with caplog.at_level("INFO"):
                record_latency("contact", "send", 12.3456)
        finally:
            reset_correlation_id(token)

        record = next(r for r in caplog.records if r.getMessage() == "metric_latency")
        assert record.latency_ms == 12.35
        assert record.correlation_id == "metric-1"
        assert record.component == "contact"

    def test_record_outcome(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("INFO"):
            record_outcome("contact", "abuse_rejected", status_code=400)

        record = next(r for r in caplog.records if r.getMessage() == "metric_outcome")
        assert record.outcome == "abuse_rejected"
        assert record.status_code == 400
