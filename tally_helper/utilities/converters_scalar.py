# tally_helper/utilities/converters_scalar.py
from __future__ import annotations

import math
import re
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Final, NamedTuple, Optional, Union

Number = Union[int, float]


class ExcelDate(NamedTuple):
    """ISO calendar date plus the raw spreadsheet serial it came from."""

    iso: Optional[str]
    serial: Optional[Number]


def is_number(value: Any) -> bool:
    """True for real numeric cell values; ``bool`` is deliberately not a number."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float, Decimal))


def is_nonzero_number(value: Any) -> bool:
    if not is_number(value):
        return False
    try:
        return math.isfinite(value) and value != 0
    except (TypeError, ValueError):
        return False


def to_number(value: Any) -> Optional[Number]:
    """
    Leniently convert a cell value to ``int``/``float``.

    Numbers pass through (``Decimal`` becomes ``float``); strings are cleaned with
    `_clean_amount_text`, so ``"1,234.50"``, ``"(500)"`` and ``"Rs 20-"`` all
    parse. Anything else, including NaN/inf and unparsable text, yields ``None``.

    Examples:
        to_number(12)           -> 12
        to_number("1,200.50")   -> 1200.5
        to_number("(1,000)")    -> -1000
        to_number("n/a")        -> None
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, Decimal):
        return float(value) if value.is_finite() else None
    if not isinstance(value, str):
        return None

    try:
        parsed = Decimal(_clean_amount_text(value))
    except (ValueError, InvalidOperation):
        return None
    if parsed == parsed.to_integral_value():
        return int(parsed)
    return float(parsed)


def _clean_amount_text(value: str) -> str:
    """
    Reduce an amount as Tally prints it to a ``Decimal``-ready string.

    ``.`` is always the decimal point and ``,`` only ever groups digits
    (``1,00,000.00`` included). A leading ``-``, a trailing ``-`` or wrapping
    parentheses make the amount negative; currency text is dropped.
    """
    s = value.replace("\xa0", "").replace(_UNICODE_MINUS, "-").strip()

    neg = False
    if s.startswith("(") and s.endswith(")"):
        neg, s = True, s[1:-1].strip()
    if s.endswith("-"):
        neg, s = not neg, s[:-1].strip()

    s = _AMOUNT_NOISE.sub("", _CURRENCY_WORD.sub("", s))
    if s.startswith("-"):
        neg, s = not neg, s[1:]
    if not any(ch.isdigit() for ch in s):
        raise ValueError(f"No digits found in input: {value!r}")
    return ("-" if neg else "") + s


# region Spreadsheet serial dates


def normalize_excel_date(value: Any) -> ExcelDate:
    """
    Normalize a spreadsheet date cell into ``ExcelDate(iso, serial)``.

    The serial counts days from the 1899-12-30 anchor used by spreadsheet
    1900 date systems, so serial 1 is 1899-12-31 and 45000 is 2023-03-15.

    Accepts:
      • date / datetime → iso of its UTC calendar day, serial = whole days since anchor
        (naive datetimes are read as UTC)
      • int / float     → serial kept as given, iso = anchor + floor(serial) days
        (fractional time-of-day is truncated, never rounded)

    Anything else, zero, NaN/inf or a serial outside the calendar range gives
    ``ExcelDate(None, None)``.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        day = value.date()
        return ExcelDate(day.isoformat(), (day - EXCEL_EPOCH).days)
    if isinstance(value, date):
        return ExcelDate(value.isoformat(), (value - EXCEL_EPOCH).days)
    if not is_nonzero_number(value):
        return ExcelDate(None, None)

    try:
        day = EXCEL_EPOCH + timedelta(days=math.floor(value))
    except (OverflowError, ValueError):
        return ExcelDate(None, None)
    return ExcelDate(day.isoformat(), value)


def to_excel_serial(value: date) -> Number:
    """Inverse of `normalize_excel_date` for native cells; keeps time of day as a fraction."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        delta = value - datetime.combine(EXCEL_EPOCH, datetime.min.time())
        serial = delta.days + delta.seconds / 86400
        return int(serial) if serial.is_integer() else serial
    return (value - EXCEL_EPOCH).days


# endregion Spreadsheet serial dates

EXCEL_EPOCH: Final[date] = date(1899, 12, 30)
# "Rs", "Rs.", "INR": the dot of an abbreviation is not a decimal point
_CURRENCY_WORD: Final[re.Pattern[str]] = re.compile(r"[^\W\d_]+\.?")
# everything but digits, the decimal point and a sign
_AMOUNT_NOISE: Final[re.Pattern[str]] = re.compile(r"[^\d.\-]+")
_UNICODE_MINUS = "\u2212"  # '−'
