"""Ports (interfaces) used by the core pipeline.

Ports define the minimal contracts for notification adapters so that the
core can be reused with different delivery backends.
"""

from __future__ import annotations

from typing import Protocol

from core.models import NotificationRequest


class NotifierPort(Protocol):
    """Notification operations required by the core pipeline."""

    def notify(self, request: NotificationRequest) -> None:
        ...
