from __future__ import annotations

from decimal import Decimal

import pytest

from adapters.notification_formatting import format_amount, format_content, format_notification
from core.models import NotificationRequest
from core.notification import build_notification_request, format_sender_display


def test_sender_display_truncates_long_senders() -> None:
    sender = "A" * 25
    display = format_sender_display(sender)
    assert len(display) == 23
    assert display.endswith("...")
    assert display.startswith("A" * 20)


def test_sender_display_keeps_short_and_empty_senders() -> None:
    assert format_sender_display("AX-HDFCBK") == "AX-HDFCBK"
    assert format_sender_display("B" * 20) == "B" * 20
    assert format_sender_display("") == ""


def test_build_notification_request_uses_display_limit() -> None:
    request = build_notification_request(Decimal("10"), "VM-ICICIB-Alerts", max_chars=5)
    assert request.sender_display == "VM-IC..."
    assert request.amount == Decimal("10")


def test_amount_always_has_two_decimals() -> None:
    assert format_amount(Decimal("500")) == "500.00"
    assert format_amount(Decimal("75.5")) == "75.50"
    assert format_amount(Decimal("0.125")) == "0.13"


def test_plain_content() -> None:
    request = NotificationRequest(amount=Decimal("1234.5"), sender_display="JD-SBIUPI")
    assert format_content(request) == "₹1234.50 from JD-SBIUPI"
    assert format_notification(request, mode="plain") == "New UPI Transaction\n₹1234.50 from JD-SBIUPI"


def test_html_escapes_sender() -> None:
    request = NotificationRequest(amount=Decimal("1"), sender_display="<bank>")
    body = format_notification(request, mode="html")
    assert body.startswith("<b>New UPI Transaction</b>")
    assert "&lt;bank&gt;" in body


def test_markdown_escapes_sender() -> None:
    request = NotificationRequest(amount=Decimal("1"), sender_display="*bank*")
    body = format_notification(request, mode="markdown")
    assert "\\*bank\\*" in body


def test_unknown_mode_raises() -> None:
    request = NotificationRequest(amount=Decimal("1"), sender_display="x")
    with pytest.raises(ValueError):
        format_notification(request, mode="rtf")


@pytest.mark.parametrize("limit", [0, -3])
def test_sender_display_limit_below_one_is_clamped(limit: int) -> None:
    assert format_sender_display("AX-HDFCBK", max_chars=limit) == "A..."
    assert format_sender_display("", max_chars=limit) == ""
