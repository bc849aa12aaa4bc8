from __future__ import annotations

import pytest

from core.classifier import is_transaction


@pytest.mark.parametrize(
    "body",
    [
        "Your a/c XX1234 is DEBITED for Rs 250",
        "debited",
        "Amount credited to your account",
        "UPI/P2M/123456/Swiggy",
        "Payment received from Ravi",
        "You paid 120 to Metro",
        "Transaction ID 99812",
        "Fund transfer successful",
    ],
)
def test_keyword_messages_are_transactions(body: str) -> None:
    assert is_transaction(body) is True


@pytest.mark.parametrize(
    "body",
    [
        "",
        "Your OTP is 482913. Do not share it.",
        "Meeting moved to 4pm tomorrow",
        "Rs 500 cashback offer on your next order",
        "₹ sale ends tonight",
    ],
)
def test_non_transaction_messages(body: str) -> None:
    assert is_transaction(body) is False


def test_currency_with_direction_is_a_transaction() -> None:
    assert is_transaction("₹40 CREDITED")
    assert is_transaction("Rs.99 debited at kiosk")


def test_rs_substring_over_match_is_kept() -> None:
    # "yours" contains "rs"; combined with a direction keyword it still counts.
    assert is_transaction("yours truly, credited")


def test_classifier_is_idempotent() -> None:
    body = "INR 500 credited via UPI"
    assert is_transaction(body) == is_transaction(body)
