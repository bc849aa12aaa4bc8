"""Logging-only notifier for dry runs and headless hosts."""

from __future__ import annotations

import logging

from adapters.notification_formatting import format_content
from core.models import NotificationRequest

LOGGER = logging.getLogger(__name__)


class LogNotifier:
    def notify(self, request: NotificationRequest) -> None:
        LOGGER.info("Notification: %s", format_content(request))
