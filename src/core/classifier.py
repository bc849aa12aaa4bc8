"""Transaction classification (core domain)."""

from __future__ import annotations

TRANSACTION_KEYWORDS = (
    "upi",
    "credited",
    "debited",
    "payment",
    "paid",
    "transaction",
    "transfer",
)
CURRENCY_MARKERS = ("rs", "₹")
DIRECTION_KEYWORDS = ("credited", "debited")


def is_transaction(body: str) -> bool:
    """Return True when the text plausibly describes a UPI transaction.

    Matching is plain substring containment on the lower-cased text, so
    "rs" also hits words like "yours". Any text satisfying the
    currency/direction pairing already contains a keyword.
    """

    lowered = (body or "").lower()
    if any(keyword in lowered for keyword in TRANSACTION_KEYWORDS):
        return True
    has_currency = any(marker in lowered for marker in CURRENCY_MARKERS)
    has_direction = any(keyword in lowered for keyword in DIRECTION_KEYWORDS)
    return has_currency and has_direction
