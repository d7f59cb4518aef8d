"""Payment key codec.

A payment key identifies one month of rent in a tenant ledger. It is stored
as a string of the form ``"<year>-<Mon>"`` (e.g. ``"2024-Jan"``) so that the
ledger can be persisted as a plain JSON object.
"""

from dataclasses import dataclass

from rentflow.domain.errors import ValidationError, invalid_month, invalid_payment_key

MONTHS: tuple[str, ...] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

ALL_MONTHS = "All"

_FULL_MONTH_NAMES = {
    "january": "Jan",
    "february": "Feb",
    "march": "Mar",
    "april": "Apr",
    "may": "May",
    "june": "Jun",
    "july": "Jul",
    "august": "Aug",
    "september": "Sep",
    "october": "Oct",
    "november": "Nov",
    "december": "Dec",
}


@dataclass(frozen=True)
class PaymentKey:
    """A (year, month) pair used as a ledger key."""

    year: int
    month: str

    def __post_init__(self):
        if isinstance(self.year, bool) or not isinstance(self.year, int) or self.year <= 0:
            raise ValidationError(f"Year must be a positive integer, got {self.year!r}")
        if self.month not in MONTHS:
            raise ValidationError(invalid_month(self.month))

    def __str__(self) -> str:
        return f"{self.year}-{self.month}"

    @property
    def month_index(self) -> int:
        """Zero-based position of the month in the calendar year."""
        return MONTHS.index(self.month)


def encode(year: int, month: str) -> str:
    """Encode a year and month abbreviation as a ledger key.

    Raises:
        ValidationError: If the month is not one of MONTHS or the year is not positive
    """
    return str(PaymentKey(year, month))


def decode(key: str) -> PaymentKey:
    """Decode a ledger key into a PaymentKey.

    The key is split on the first ``-``.

    Raises:
        ValidationError: If the key is not shaped like ``"<year>-<Mon>"``
    """
    year_str, sep, month = key.partition("-")
    if not sep or not (year_str.isascii() and year_str.isdigit()):
        raise ValidationError(invalid_payment_key(key))
    try:
        return PaymentKey(int(year_str), month)
    except ValidationError:
        raise ValidationError(invalid_payment_key(key)) from None


def normalize_month(month: str) -> str:
    """Normalize user input into a month abbreviation.

    Accepts any case and full month names, e.g. "feb", "FEB", "February".

    Raises:
        ValidationError: If the text does not name a month
    """
    text = month.strip().lower()
    if text in _FULL_MONTH_NAMES:
        return _FULL_MONTH_NAMES[text]
    candidate = text[:1].upper() + text[1:]
    if candidate in MONTHS:
        return candidate
    raise ValidationError(invalid_month(month))


def normalize_month_filter(month: str) -> str:
    """Normalize a month filter, which is either "All" or a month abbreviation."""
    if month.strip().lower() == ALL_MONTHS.lower():
        return ALL_MONTHS
    return normalize_month(month)
