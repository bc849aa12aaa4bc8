"""Shared notification formatting helpers.

Keeping formatting here prevents drift between adapters and keeps messages
consistent regardless of delivery channel.
"""

from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
import html

from core.config import NOTIFICATION_TITLE
from core.models import NotificationRequest

_CENTS = Decimal("0.01")


def format_amount(amount: Decimal) -> str:
    """Render an amount with exactly two decimal places."""

    return str(amount.quantize(_CENTS, rounding=ROUND_HALF_UP))


def format_content(request: NotificationRequest) -> str:
    """Return the one-line notification body, e.g. "₹250.00 from AX-HDFCBK"."""

    return f"₹{format_amount(request.amount)} from {request.sender_display}"


def _format_markdown(request: NotificationRequest, title: str) -> str:
    def escape_md(value: str) -> str:
        for ch in r"*[`_":
            value = value.replace(ch, f"\\{ch}")
        return value

    return "\n".join([f"**{escape_md(title)}**", escape_md(format_content(request))])


def _format_html(request: NotificationRequest, title: str) -> str:
    return "\n".join([f"<b>{html.escape(title)}</b>", html.escape(format_content(request))])


def format_notification(
    request: NotificationRequest,
    mode: str,
    title: str = NOTIFICATION_TITLE,
) -> str:
    """Return the notification formatted for the requested mode."""

    if mode == "plain":
        return f"{title}\n{format_content(request)}"
    if mode == "markdown":
        return _format_markdown(request, title)
    if mode == "html":
        return _format_html(request, title)
    raise ValueError(f"Unsupported notification format: {mode}")
