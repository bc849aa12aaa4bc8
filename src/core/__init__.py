"""Core domain package for upiwatch.

Core contains transaction classification, amount extraction, and the
processing glue without any Telegram, Termux, or delivery-specific code,
keeping the business logic portable.
"""
