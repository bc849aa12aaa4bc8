"""Core message processing pipeline.

This module is integration-agnostic. It only relies on the notifier port,
enabling new message sources or delivery adapters without changes here.

The pipeline enforces a strict order per message:
1) Classify the body as a transaction (or not)
2) Extract an amount
3) Build the notification request and hand it to the notifier
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from core.amount_extractor import extract_amount_result
from core.classifier import is_transaction
from core.config import NotificationConfig
from core.models import NotificationRequest, SmsMessage
from core.notification import build_notification_request
from core.ports import NotifierPort

LOGGER = logging.getLogger(__name__)


class MessageProcessor:
    """Orchestrates classification, extraction, and notifications."""

    def __init__(self, notifier: NotifierPort, config: Optional[NotificationConfig] = None) -> None:
        self._notifier = notifier
        self._config = config or NotificationConfig()

    def handle(self, message: SmsMessage) -> Optional[NotificationRequest]:
        """Process one message and return the request sent to the notifier."""

        if not is_transaction(message.body):
            LOGGER.debug("Skipping non-transaction message from %s", message.sender or "unknown")
            return None

        result = extract_amount_result(message.body)
        if result is None:
            LOGGER.debug("No amount found in transaction message from %s", message.sender or "unknown")
            return None

        request = build_notification_request(
            result.amount,
            message.sender,
            self._config.sender_display_chars,
        )
        LOGGER.info(
            "Transaction detected from %s (%s)",
            request.sender_display or "unknown",
            result.rule_name,
        )
        self._notify(request)
        return request

    def handle_batch(self, messages: Iterable[SmsMessage]) -> List[NotificationRequest]:
        """Process messages in delivery order; each one is independent."""

        sent: List[NotificationRequest] = []
        for message in messages:
            request = self.handle(message)
            if request is not None:
                sent.append(request)
        return sent

    def _notify(self, request: NotificationRequest) -> None:
        # Delivery is best-effort: a missing permission or a dead endpoint
        # must not stop the rest of the batch.
        try:
            self._notifier.notify(request)
        except Exception:
            LOGGER.warning("Notification delivery failed for %s", request.sender_display, exc_info=True)
