"""Testes do SendContactMessageUseCase com clientes fake."""

from __future__ import annotations

import pytest

from app.constants.contact import (
    DISPATCH_FAILED_MESSAGE,
    RECAPTCHA_FAILED_MESSAGE,
    SEND_SUCCESS_MESSAGE,
)
from app.domain.contact_pipeline import FailureKind, PipelineStage
from app.protocols.abuse_check import VerificationOutcome
from app.protocols.mail_dispatch import EmailDispatchError
from app.use_cases.contact import SendContactMessageUseCase
from tests.fakes.fake_contact_clients import FakeAbuseCheck, FakeMailClient, valid_payload


class TestSendContactMessageUseCase:
    """Testes do pipeline validate → verify → send."""

    @pytest.mark.asyncio
    async def test_success_sends_once_and_returns_200(self) -> None:
        abuse_check = FakeAbuseCheck()
        mail_client = FakeMailClient()
        use_case = SendContactMessageUseCase(abuse_check, mail_client)

        result = await use_case.execute(valid_payload(), remote_ip="198.51.100.4")

        assert result.status_code == 200
        assert result.body == {"success": True, "message": SEND_SUCCESS_MESSAGE}
        assert result.success is True
        assert result.last_stage is PipelineStage.SENT
        assert abuse_check.calls == [("valid-token", "198.51.100.4")]
        assert len(mail_client.sent) == 1
        assert mail_client.sent[0].email == "jeandupont@gmail.com"

    @pytest.mark.asyncio
    async def test_validation_error_short_circuits(self) -> None:
        abuse_check = FakeAbuseCheck()
        mail_client = FakeMailClient()
        use_case = SendContactMessageUseCase(abuse_check, mail_client)

        result = await use_case.execute(valid_payload(email="pas-un-email", message="court"))

        assert result.status_code == 400
        assert result.failure is FailureKind.VALIDATION_ERROR
        assert result.body["success"] is False
        assert [error["field"] for error in result.body["errors"]] == ["email", "message"]
        assert abuse_check.calls == []
        assert mail_client.sent == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "outcome", [VerificationOutcome.REJECTED, VerificationOutcome.UNAVAILABLE]
    )
    async def test_abuse_check_failure_returns_400_without_sending(
        self, outcome: VerificationOutcome
    ) -> None:
        """Rejeição e indisponibilidade têm a mesma resposta HTTP."""
        mail_client = FakeMailClient()
        use_case = SendContactMessageUseCase(FakeAbuseCheck(outcome=outcome), mail_client)

        result = await use_case.execute(valid_payload())

        assert result.status_code == 400
        assert result.body == {"success": False, "message": RECAPTCHA_FAILED_MESSAGE}
        assert result.failure is FailureKind.ABUSE_REJECTED
        assert result.last_stage is PipelineStage.VALIDATED
        assert mail_client.sent == []

    @pytest.mark.asyncio
    async def test_dispatch_failure_returns_generic_500(self) -> None:
        """Texto do provedor nunca chega ao corpo da resposta."""
        error = EmailDispatchError(
            "emailjs_http_status", status_code=412, provider_text="Invalid grant"
        )
        use_case = SendContactMessageUseCase(FakeAbuseCheck(), FakeMailClient(error=error))

        result = await use_case.execute(valid_payload())

        assert result.status_code == 500
        assert result.body == {"success": False, "message": DISPATCH_FAILED_MESSAGE}
        assert result.failure is FailureKind.DISPATCH_FAILURE
        assert "Invalid grant" not in str(result.body)

    @pytest.mark.asyncio
    async def test_escaped_fields_are_forwarded(self) -> None:
        mail_client = FakeMailClient()
        use_case = SendContactMessageUseCase(FakeAbuseCheck(), mail_client)

        await use_case.execute(valid_payload(message="<script>alert(1)</script> merci"))

        assert mail_client.sent[0].message == "&lt;script&gt;alert(1)&lt;&#x2F;script&gt; merci"

    @pytest.mark.asyncio
    async def test_records_outcome_metric(self, caplog: pytest.LogCaptureFixture) -> None:
        use_case = SendContactMessageUseCase(FakeAbuseCheck(), FakeMailClient())

        with caplog.at_level("INFO"):
            await use_case.execute(valid_payload())

        outcomes = [r for r in caplog.records if r.getMessage() == "metric_outcome"]
        assert len(outcomes) == 1
        assert outcomes[0].outcome == "sent"
        assert outcomes[0].status_code == 200

    @pytest.mark.asyncio
    async def test_aclose_closes_clients(self) -> None:
        mail_client = FakeMailClient()
        use_case = SendContactMessageUseCase(FakeAbuseCheck(), mail_client)

        await use_case.aclose()

        assert mail_client.closed is True
