"""Protocolos e contratos do core da aplicação."""

from .abuse_check import AbuseCheckClientProtocol, VerificationOutcome, VerificationResult
from .mail_dispatch import DispatchReceipt, EmailDispatchError, MailDispatchClientProtocol

__all__ = [
    "AbuseCheckClientProtocol",
    "DispatchReceipt",
    "EmailDispatchError",
    "MailDispatchClientProtocol",
    "VerificationOutcome",
    "VerificationResult",
]
