"""Telegram Bot API notification adapter.

Uses the Bot API for delivery so transaction alerts can be routed to any
chat the bot can write to, e.g. when the phone itself cannot notify.
"""

from __future__ import annotations

import json
import urllib.error
import urllib.request

from adapters.notification_formatting import format_notification
from core.config import NOTIFICATION_TITLE
from core.models import NotificationRequest


class TelegramBotNotifier:
    """Notifier adapter that sends messages via the Telegram Bot API."""

    def __init__(self, bot_token: str, chat_id: str, title: str = NOTIFICATION_TITLE) -> None:
        self._bot_token = bot_token
        self._chat_id = chat_id
        self._title = title

    def _endpoint(self) -> str:
        # The Bot API endpoint is deterministic and derived from the token.
        return f"https://api.telegram.org/bot{self._bot_token}/sendMessage"

    def build_payload(self, request: NotificationRequest) -> dict:
        return {
            "chat_id": self._chat_id,
            "text": format_notification(request, mode="html", title=self._title),
            "parse_mode": "HTML",
            "disable_web_page_preview": True,
            # High priority: always ring, never deliver silently.
            "disable_notification": False,
        }

    def notify(self, request: NotificationRequest) -> None:
        """Send the formatted notification via the Bot API."""

        data = json.dumps(self.build_payload(request)).encode("utf-8")
        http_request = urllib.request.Request(self._endpoint(), data=data, method="POST")
        http_request.add_header("Content-Type", "application/json")
        try:
            with urllib.request.urlopen(http_request, timeout=10):
                pass
        except urllib.error.HTTPError as e:
            body = e.read().decode("utf-8", errors="replace")
            raise RuntimeError(f"Bot API error {e.code}: {body}") from e
