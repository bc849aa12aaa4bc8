"""Local Android notification adapter backed by Termux:API.

Each call shells out to ``termux-notification`` with high priority, sound,
and vibration. Notification ids are derived from the wall clock so that
back-to-back alerts never replace one another.
"""

from __future__ import annotations

import logging
import subprocess
import time
from typing import Callable, List, Optional

from adapters.notification_formatting import format_content
from core.config import CHANNEL_ID, NOTIFICATION_TITLE
from core.models import NotificationRequest

LOGGER = logging.getLogger(__name__)

TERMUX_NOTIFICATION_BIN = "termux-notification"
VIBRATE_PATTERN = "500,1000,500"


class TermuxNotifier:
    """Notifier adapter that raises a notification on the Android device."""

    def __init__(
        self,
        channel_id: str = CHANNEL_ID,
        title: str = NOTIFICATION_TITLE,
        clock: Callable[[], float] = time.time,
        runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
        timeout: float = 10,
    ) -> None:
        self._channel_id = channel_id
        self._title = title
        self._clock = clock
        self._runner = runner
        self._timeout = timeout
        self._last_id: Optional[int] = None

    def next_notification_id(self) -> int:
        """Return a millisecond timestamp id, strictly greater than the last one."""

        candidate = int(self._clock() * 1000)
        if self._last_id is not None and candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return candidate

    def build_command(self, request: NotificationRequest, notification_id: int) -> List[str]:
        # Termux notifications are dismissed on tap unless --ongoing is given.
        return [
            TERMUX_NOTIFICATION_BIN,
            "--id",
            str(notification_id),
            "--group",
            self._channel_id,
            "--title",
            self._title,
            "--content",
            format_content(request),
            "--priority",
            "high",
            "--sound",
            "--vibrate",
            VIBRATE_PATTERN,
        ]

    def notify(self, request: NotificationRequest) -> None:
        """Raise the notification, turning launcher failures into RuntimeError."""

        command = self.build_command(request, self.next_notification_id())
        try:
            self._runner(command, check=True, capture_output=True, text=True, timeout=self._timeout)
        except FileNotFoundError as e:
            raise RuntimeError(f"{TERMUX_NOTIFICATION_BIN} not found; is Termux:API installed?") from e
        except subprocess.CalledProcessError as e:
            raise RuntimeError(f"{TERMUX_NOTIFICATION_BIN} failed ({e.returncode}): {e.stderr}") from e
        except subprocess.TimeoutExpired as e:
            raise RuntimeError(f"{TERMUX_NOTIFICATION_BIN} timed out after {e.timeout}s") from e
        LOGGER.debug("Notification %s raised for %s", command[2], request.sender_display)
