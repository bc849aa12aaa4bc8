"""Telegram-to-core message mapping adapter.

SMS forwarder apps can relay bank messages into a Telegram chat. This keeps
Telethon-specific details out of the core pipeline by turning those
forwarded posts back into SmsMessage values.
"""

from __future__ import annotations

import re
from typing import Optional

from telethon.tl.custom import Message

from core.models import SmsMessage

# Forwarders usually prefix the relayed SMS with "From: <sender>".
_FROM_HEADER = re.compile(r"^[ \t]*from[ \t]*:[ \t]*(?P<sender>\S.*?)[ \t]*$", re.IGNORECASE | re.MULTILINE)


def source_key_from_message(message: Message) -> str:
    """Normalize a source key using a single rule enforced across the app."""

    chat = getattr(message, "chat", None)
    username = getattr(chat, "username", None)

    if isinstance(username, str) and username:
        return f"@{username.lower()}"

    # Fallback: always stable and universal
    return f"chat_id:{message.chat_id}"


def _sender_from_header(text: str) -> Optional[str]:
    match = _FROM_HEADER.search(text)
    if not match:
        return None
    return match.group("sender")


def _sender_from_forward(message: Message) -> Optional[str]:
    forward = getattr(message, "forward", None)
    from_name = getattr(forward, "from_name", None)
    if isinstance(from_name, str) and from_name:
        return from_name
    return None


def build_message(message: Message) -> SmsMessage:
    """Build a core SmsMessage from a Telethon Message."""

    text = message.raw_text or ""
    sender = (
        _sender_from_header(text)
        or _sender_from_forward(message)
        or source_key_from_message(message)
    )
    return SmsMessage(body=text, sender=sender)
