"""JSON-based SMS sources.

Converts exported or live SMS listings into core SmsMessage values. The
accepted record shape matches ``termux-sms-list`` output (``number`` and
``body``) as well as generic ``sender``/``address`` exports.
"""

from __future__ import annotations

import json
import logging
import subprocess
from typing import Any, Iterable, List, TextIO

from core.models import SmsMessage

LOGGER = logging.getLogger(__name__)

SENDER_FIELDS = ("sender", "number", "address")


class SmsSourceError(RuntimeError):
    """Raised when a message source cannot be read or parsed."""


def message_from_mapping(data: dict[str, Any]) -> SmsMessage:
    """Build an SmsMessage from one JSON record; missing fields become ""."""

    sender = ""
    for field in SENDER_FIELDS:
        value = data.get(field)
        if value:
            sender = str(value)
            break
    body = data.get("body")
    return SmsMessage(body=str(body) if body is not None else "", sender=sender)


def _records_from_payload(payload: Any) -> Iterable[dict[str, Any]]:
    if isinstance(payload, dict):
        return [payload]
    if isinstance(payload, list):
        return payload
    raise SmsSourceError(f"Unsupported JSON payload: {type(payload).__name__}")


def parse_messages(raw: str) -> List[SmsMessage]:
    """Parse a JSON array, a single object, or JSON lines into messages."""

    raw = raw.strip()
    if not raw:
        return []

    try:
        records = list(_records_from_payload(json.loads(raw)))
    except json.JSONDecodeError:
        # Not a single document; fall back to one JSON object per line.
        records = []
        for line_no, line in enumerate(raw.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                records.extend(_records_from_payload(json.loads(line)))
            except json.JSONDecodeError as e:
                raise SmsSourceError(f"Invalid JSON on line {line_no}: {e.msg}") from e

    messages: List[SmsMessage] = []
    for record in records:
        if not isinstance(record, dict):
            raise SmsSourceError(f"Expected an object per message, got {type(record).__name__}")
        messages.append(message_from_mapping(record))
    return messages


def load_messages(stream: TextIO) -> List[SmsMessage]:
    return parse_messages(stream.read())


def read_termux_inbox(limit: int, runner=subprocess.run) -> List[SmsMessage]:
    """Read the latest inbox messages through ``termux-sms-list``.

    termux-sms-list returns newest-last, which is also the order we want to
    process them in.
    """

    command = ["termux-sms-list", "-l", str(limit), "-t", "inbox"]
    try:
        completed = runner(command, check=True, capture_output=True, text=True, timeout=30)
    except FileNotFoundError as e:
        raise SmsSourceError("termux-sms-list not found; is Termux:API installed?") from e
    except subprocess.CalledProcessError as e:
        raise SmsSourceError(f"termux-sms-list failed ({e.returncode}): {e.stderr}") from e
    except subprocess.TimeoutExpired as e:
        raise SmsSourceError(f"termux-sms-list timed out after {e.timeout}s") from e

    messages = parse_messages(completed.stdout)
    LOGGER.info("Read %s messages from the Termux inbox", len(messages))
    return messages
