"""Application entry point for the upiwatch SMS transaction notifier."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from art import tprint
from dotenv import load_dotenv

import settings
from adapters.log_notifier import LogNotifier
from adapters.sms_sources import load_messages, read_termux_inbox
from adapters.telegram_bot_notifier import TelegramBotNotifier
from adapters.termux_notifier import TermuxNotifier
from core.config import NotificationConfig
from core.ports import NotifierPort
from core.processor import MessageProcessor

NAME = "UPIWATCH"
FONT = "tarty-1"


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


class _RedactingFormatter(logging.Formatter):
    def __init__(self, secrets: list[str], fmt: str, datefmt: Optional[str] = None) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self._secrets = [secret for secret in secrets if secret]

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        for secret in self._secrets:
            message = message.replace(secret, "***")
        return message


def _collect_redaction_values(config: dict) -> list[str]:
    redact_cfg = config.get("redact", {}) if config else {}
    if not redact_cfg.get("enabled", False):
        return []
    values = []
    for name in redact_cfg.get("patterns", []):
        value = os.getenv(name)
        if value:
            values.append(value)
    return sorted(set(values), key=len, reverse=True)


def _configure_logging() -> None:
    config = settings.LOGGING or {}
    if not config.get("enabled", False):
        return

    load_dotenv()
    level_name = str(config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    formatter = _RedactingFormatter(_collect_redaction_values(config), fmt=fmt, datefmt=datefmt)

    handlers: list[logging.Handler] = []

    if config.get("console", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        path = file_cfg.get("path", "logs/upiwatch.log")
        if not os.path.isabs(path):
            path = os.path.join(settings.PROJECT_ROOT, path)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        file_handler = RotatingFileHandler(
            path,
            maxBytes=int(file_cfg.get("max_bytes", 5 * 1024 * 1024)),
            backupCount=int(file_cfg.get("backup_count", 5)),
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        return

    logging.basicConfig(level=level, handlers=handlers)


def _build_notifier(method: str) -> NotifierPort:
    """Select the notification adapter so the processor stays delivery-agnostic."""

    if method == "termux":
        return TermuxNotifier()
    if method == "bot":
        load_dotenv()
        bot_token = os.getenv("BOT_API")
        if not bot_token:
            raise RuntimeError("BOT_API is required when notification_method=bot")
        if not settings.BOT_CHAT_ID:
            raise RuntimeError("notifications.bot_chat_id is required for bot notifications")
        return TelegramBotNotifier(bot_token=bot_token, chat_id=str(settings.BOT_CHAT_ID))
    if method == "log":
        return LogNotifier()
    raise RuntimeError("notification_method must be 'termux', 'bot', or 'log'")


def _build_processor(method: Optional[str]) -> MessageProcessor:
    method = method or settings.NOTIFICATION_METHOD
    notifier = _build_notifier(method)
    logging.getLogger(__name__).info("Selected notification method - %s", method)
    config = NotificationConfig(sender_display_chars=settings.SENDER_DISPLAY_CHARS)
    return MessageProcessor(notifier=notifier, config=config)


def _scan(path: Optional[str], method: Optional[str]) -> None:
    processor = _build_processor(method)
    if not path or path == "-":
        messages = load_messages(sys.stdin)
    else:
        with open(path, "r", encoding="utf-8") as handle:
            messages = load_messages(handle)
    sent = processor.handle_batch(messages)
    logging.getLogger(__name__).info("Scan complete: messages=%s, notifications=%s", len(messages), len(sent))


def _inbox(limit: Optional[int], method: Optional[str]) -> None:
    processor = _build_processor(method)
    messages = read_termux_inbox(limit or settings.TERMUX_LIMIT)
    sent = processor.handle_batch(messages)
    logging.getLogger(__name__).info("Inbox complete: messages=%s, notifications=%s", len(messages), len(sent))


def _run(method: Optional[str]) -> None:
    from telethon import events

    from adapters.telegram_mapper import build_message, source_key_from_message
    from client import build_client

    logger = logging.getLogger(__name__)
    if not settings.TELEGRAM_CHATS:
        raise RuntimeError("sources.telegram_chats must list at least one chat for run")

    processor = _build_processor(method)
    client = build_client()

    # Single handler keeps Telethon integration minimal and defers all
    # classification to the core processor.
    @client.on(events.NewMessage(incoming=True))
    async def handler(event) -> None:
        try:
            if source_key_from_message(event.message) not in settings.TELEGRAM_CHATS:
                return
            # Deliberately synchronous: a slow notifier stalls the loop for at
            # most its own timeout, and forwarded SMS arrive one at a time.
            processor.handle(build_message(event.message))
        except Exception:
            logger.exception("Error while processing message")

    client.start()
    logger.info("Client connected. Listening for forwarded SMS...")
    client.run_until_disconnected()


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="upiwatch")
    parser.add_argument(
        "--notify",
        choices=["termux", "bot", "log"],
        help="Override notifications.notification_method from config.json",
    )
    subparsers = parser.add_subparsers(dest="command")

    scan_parser = subparsers.add_parser("scan", help="Process messages from a JSON file or stdin")
    scan_parser.add_argument("path", nargs="?", default="-")
    inbox_parser = subparsers.add_parser("inbox", help="Process the latest SMS via termux-sms-list")
    inbox_parser.add_argument("--limit", type=int)
    subparsers.add_parser("run", help="Listen for SMS forwarded into Telegram chats")

    args = parser.parse_args(argv)
    _print_banner()
    _configure_logging()
    logging.getLogger(__name__).info("Starting upiwatch")

    if args.command == "scan":
        _scan(args.path, args.notify)
        return
    if args.command == "inbox":
        _inbox(args.limit, args.notify)
        return
    if args.command == "run":
        _run(args.notify)
        return
    parser.print_help()


if __name__ == "__main__":
    main()
