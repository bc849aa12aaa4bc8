"""Core configuration dataclasses.

We keep config parsing outside the core, but these dataclasses define the
shape the core expects so adapters and app layers can build safely.
"""

from __future__ import annotations

from dataclasses import dataclass

# Delivery channel/group shared by every transaction notification.
CHANNEL_ID = "upi_transactions"
NOTIFICATION_TITLE = "New UPI Transaction"


@dataclass(frozen=True)
class NotificationConfig:
    """Notification settings consumed by the core processor."""

    sender_display_chars: int = 20
