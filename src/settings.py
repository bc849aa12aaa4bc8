"""Static configuration for upiwatch.

All user-editable settings (notification method, watched chats, logging)
live in a single JSON file for quick edits without touching Python.
"""

import json
import os

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# config.json sits at the project root unless UPIWATCH_CONFIG points elsewhere.
CONFIG_PATH = os.getenv("UPIWATCH_CONFIG") or os.path.join(PROJECT_ROOT, "config.json")


def _load_json_config() -> dict:
    """Load config.json with a flat, user-friendly schema."""

    if not os.path.exists(CONFIG_PATH):
        raise FileNotFoundError(f"Config file not found: {CONFIG_PATH}")

    with open(CONFIG_PATH, "r", encoding="utf-8") as handle:
        return json.load(handle)


def _normalize_chat_keys(raw_keys: list) -> set[str]:
    """Lower-case @usernames so they compare equal to mapper source keys."""

    keys: set[str] = set()
    for key in raw_keys:
        if not key:
            continue
        key = str(key).strip()
        keys.add(key.lower() if key.startswith("@") else key)
    return keys


_CONFIG = _load_json_config()

# Expose the raw config for modules that need structured access.
CONFIG = _CONFIG

_notifications = _CONFIG.get("notifications", {})
# Notification method switches adapters without changing core logic:
# "termux", "bot", or "log".
NOTIFICATION_METHOD = _notifications.get("notification_method", "termux")
# Bot chat id is only required when notification_method=bot.
BOT_CHAT_ID = _notifications.get("bot_chat_id")
SENDER_DISPLAY_CHARS = int(_notifications.get("sender_display_chars", 20))

_sources = _CONFIG.get("sources", {})
# Chats an SMS forwarder posts into; only used by the "run" command.
TELEGRAM_CHATS = _normalize_chat_keys(_sources.get("telegram_chats", []))
TERMUX_LIMIT = int(_sources.get("termux_limit", 10))

# Logging configuration (optional).
LOGGING = _CONFIG.get("logging", {})
