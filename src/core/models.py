"""Core domain models.

These dataclasses are shared across the core and adapters to avoid tight
coupling to any integration-specific types.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class SmsMessage:
    """One inbound text message, normalized by a source adapter."""

    body: str
    sender: str = ""


@dataclass(frozen=True)
class ExtractionResult:
    """An accepted amount and the extraction rule that produced it."""

    amount: Decimal
    rule_name: str


@dataclass(frozen=True)
class NotificationRequest:
    """Everything a notifier needs to announce a detected transaction."""

    amount: Decimal
    sender_display: str
