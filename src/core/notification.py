"""Notification request building (core domain)."""

from __future__ import annotations

from decimal import Decimal

from core.models import NotificationRequest

ELLIPSIS = "..."


def format_sender_display(sender: str, max_chars: int = 20) -> str:
    """Clip long senders to max_chars and mark the cut with an ellipsis.

    Limits below one are treated as one so a misconfigured limit still shows
    the start of the sender.
    """

    sender = sender or ""
    max_chars = max(max_chars, 1)
    if len(sender) > max_chars:
        return sender[:max_chars] + ELLIPSIS
    return sender


def build_notification_request(amount: Decimal, sender: str, max_chars: int = 20) -> NotificationRequest:
    return NotificationRequest(
        amount=amount,
        sender_display=format_sender_display(sender, max_chars),
    )
