"""Tests for the payment key codec."""

import pytest

from rentflow.domain.errors import ValidationError
from rentflow.domain.payment_key import (
    ALL_MONTHS,
    MONTHS,
    PaymentKey,
    decode,
    encode,
    normalize_month,
    normalize_month_filter,
)


def test_months_are_ordered_calendar_abbreviations():
    assert MONTHS[0] == "Jan"
    assert MONTHS[-1] == "Dec"
    assert len(MONTHS) == 12


def test_encode():
    assert encode(2024, "Jan") == "2024-Jan"


def test_encode_rejects_unknown_month():
    with pytest.raises(ValidationError):
        encode(2024, "January")


def test_encode_rejects_non_positive_year():
    with pytest.raises(ValidationError):
        encode(0, "Jan")


def test_decode():
    key = decode("2024-Feb")
    assert key == PaymentKey(2024, "Feb")
    assert key.month_index == 1


def test_payment_key_str():
    assert str(PaymentKey(2025, "Dec")) == "2025-Dec"


def test_payment_key_equality():
    assert PaymentKey(2024, "Jan") == PaymentKey(2024, "Jan")
    assert PaymentKey(2024, "Jan") != PaymentKey(2023, "Jan")
    assert PaymentKey(2024, "Jan") != PaymentKey(2024, "Feb")


@pytest.mark.parametrize(
    "key",
    [
        "Jan",
        "2024",
        "2024-",
        "2024-jan",
        "2024-January",
        "abcd-Jan",
        "-Jan",
        "2024-Jan-extra",
        "-2024-Jan",
        "²024-Jan",
        "٢٠٢٤-Jan",
    ],
)
def test_decode_rejects_malformed_keys(key):
    with pytest.raises(ValidationError):
        decode(key)


@pytest.mark.parametrize(
    "text, expected",
    [("feb", "Feb"), ("FEB", "Feb"), ("Feb", "Feb"), ("february", "Feb"), (" September ", "Sep")],
)
def test_normalize_month(text, expected):
    assert normalize_month(text) == expected


def test_normalize_month_rejects_unknown():
    with pytest.raises(ValidationError):
        normalize_month("Smarch")


def test_normalize_month_filter_accepts_all():
    assert normalize_month_filter("all") == ALL_MONTHS
    assert normalize_month_filter("mar") == "Mar"
