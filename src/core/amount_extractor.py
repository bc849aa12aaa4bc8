"""Amount extraction rules and validation (core domain).

Rules are ordered by how confident we are that the number is a currency
amount: an explicit currency prefix beats a currency suffix, and both beat
the bare grouped-number fallback.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import re
from typing import List, Optional

from core.models import ExtractionResult

MAX_AMOUNT = Decimal("100000000")

_NUMBER = r"([0-9,]+(?:\.[0-9]{1,2})?)"


@dataclass(frozen=True)
class AmountRule:
    """A named pattern whose first capture group is an amount candidate."""

    name: str
    pattern: re.Pattern


AMOUNT_RULES: List[AmountRule] = [
    AmountRule(
        name="currency_prefixed",
        pattern=re.compile(
            r"(?:rs\.?|inr|₹|rupees?|amount|amt)\s*:?\s*" + _NUMBER,
            re.IGNORECASE,
        ),
    ),
    AmountRule(
        name="currency_suffixed",
        pattern=re.compile(_NUMBER + r"\s*(?:rs|inr|₹|rupees?)", re.IGNORECASE),
    ),
    # Indian digit grouping only (12,34,567.89), so phone numbers and dates
    # do not qualify.
    AmountRule(
        name="bare_grouped",
        pattern=re.compile(r"\b([0-9]{1,2}(?:,[0-9]{2})*(?:\.[0-9]{1,2})?)\b"),
    ),
]


def parse_candidate(raw: str) -> Optional[Decimal]:
    """Return the candidate as a Decimal if it is a usable amount."""

    try:
        value = Decimal(raw.replace(",", ""))
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    if value <= 0 or value >= MAX_AMOUNT:
        return None
    return value


def extract_amount_result(body: str) -> Optional[ExtractionResult]:
    """Return the first valid amount along with the rule that found it."""

    if not body:
        return None

    for rule in AMOUNT_RULES:
        for match in rule.pattern.finditer(body):
            amount = parse_candidate(match.group(1))
            if amount is not None:
                return ExtractionResult(amount=amount, rule_name=rule.name)
    return None


def extract_amount(body: str) -> Optional[Decimal]:
    """Return the first valid amount found in the text, or None."""

    result = extract_amount_result(body)
    if result is None:
        return None
    return result.amount
