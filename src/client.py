"""Telethon client for the forwarded-SMS listener.

Only the ``run`` command talks to Telegram: an SMS forwarder app relays bank
messages into a chat, and this client reads them back. Credentials live in
``.env`` (see ``.env.example``) next to the bot token.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from telethon import TelegramClient

DEFAULT_SESSION_NAME = "upiwatch"


@dataclass(frozen=True)
class TelegramCredentials:
    api_id: int
    api_hash: str
    session_name: str


def load_credentials(env: Mapping[str, str]) -> TelegramCredentials:
    """Read API_ID, API_HASH and SESSION_NAME from an environment mapping."""

    missing = [name for name in ("API_ID", "API_HASH") if not env.get(name)]
    if missing:
        raise RuntimeError(
            f"upiwatch run needs {', '.join(missing)} in .env to read forwarded SMS from Telegram"
        )

    raw_id = env["API_ID"].strip()
    if not raw_id.isdigit():
        raise RuntimeError(f"API_ID must be the numeric app id from my.telegram.org, got {raw_id!r}")

    return TelegramCredentials(
        api_id=int(raw_id),
        api_hash=env["API_HASH"].strip(),
        session_name=env.get("SESSION_NAME") or DEFAULT_SESSION_NAME,
    )


def build_client(credentials: Optional[TelegramCredentials] = None) -> TelegramClient:
    if credentials is None:
        load_dotenv()
        credentials = load_credentials(os.environ)

    logging.getLogger(__name__).info("Opening Telegram session %s", credentials.session_name)
    return TelegramClient(credentials.session_name, credentials.api_id, credentials.api_hash)
