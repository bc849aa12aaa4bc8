from __future__ import annotations

import subprocess
from decimal import Decimal

import pytest

from adapters.termux_notifier import TermuxNotifier
from core.models import NotificationRequest


class FixedClock:
    def __init__(self, value: float) -> None:
        self.value = value

    def __call__(self) -> float:
        return self.value


def _request() -> NotificationRequest:
    return NotificationRequest(amount=Decimal("99.9"), sender_display="VK-KOTAKB")


def test_notification_ids_are_strictly_increasing() -> None:
    clock = FixedClock(1700000000.0)
    notifier = TermuxNotifier(clock=clock)

    first = notifier.next_notification_id()
    second = notifier.next_notification_id()
    clock.value += 5
    third = notifier.next_notification_id()

    assert first == 1700000000000
    assert second == first + 1
    assert third == 1700000005000


def test_command_carries_channel_priority_and_content() -> None:
    notifier = TermuxNotifier()
    command = notifier.build_command(_request(), 42)

    assert command[0] == "termux-notification"
    assert command[command.index("--id") + 1] == "42"
    assert command[command.index("--group") + 1] == "upi_transactions"
    assert command[command.index("--title") + 1] == "New UPI Transaction"
    assert command[command.index("--content") + 1] == "₹99.90 from VK-KOTAKB"
    assert command[command.index("--priority") + 1] == "high"
    assert "--sound" in command
    assert "--vibrate" in command
    assert "--ongoing" not in command


def test_notify_runs_command() -> None:
    calls = []

    def runner(command, **kwargs):
        calls.append((command, kwargs))
        return subprocess.CompletedProcess(command, 0, stdout="", stderr="")

    TermuxNotifier(clock=FixedClock(1.0), runner=runner).notify(_request())

    command, kwargs = calls[0]
    assert command[command.index("--id") + 1] == "1000"
    assert kwargs["check"] is True


def test_notify_wraps_launcher_errors() -> None:
    def missing(command, **kwargs):
        raise FileNotFoundError(command[0])

    def failing(command, **kwargs):
        raise subprocess.CalledProcessError(1, command, stderr="permission denied")

    with pytest.raises(RuntimeError):
        TermuxNotifier(runner=missing).notify(_request())
    with pytest.raises(RuntimeError, match="permission denied"):
        TermuxNotifier(runner=failing).notify(_request())


def test_notify_wraps_timeouts() -> None:
    def hanging(command, **kwargs):
        raise subprocess.TimeoutExpired(command, kwargs["timeout"])

    with pytest.raises(RuntimeError, match="timed out"):
        TermuxNotifier(runner=hanging).notify(_request())
