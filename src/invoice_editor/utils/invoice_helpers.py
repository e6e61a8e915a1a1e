"""
Helper functions for line-item normalization and invoice formatting.

Provides helpers for:
- Parsing user-typed decimal text the way a browser number field does
- Normalizing an edited line-item field (the trailing-edit heuristic)
- Rendering numbers for storage and for display
- Resolving invoice and due dates
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from invoice_editor.models.invoice import Invoice

DATE_FORMAT = "%b %d, %Y"
DUE_DATE_OFFSET = timedelta(days=30)

# Longest numeric prefix accepted by a lenient float parse ("12abc" -> 12).
_DECIMAL_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)
_EXPONENT_PADDING = re.compile(r"e([+-])0*(\d)")


def parse_decimal(text: str | None) -> float:
    """
    Parse the leading decimal number in text.

    Leading whitespace is skipped and trailing garbage is ignored, so
    "12abc" parses as 12.0. Text without a numeric prefix parses as NaN.

    Args:
        text: User-typed text.

    Returns:
        The parsed float, NaN when nothing numeric was found.
    """
    if not text:
        return math.nan
    match = _DECIMAL_PREFIX.match(text.lstrip())
    if not match:
        return math.nan
    return float(match.group(0))


def to_number(text: str | None) -> float:
    """Parse text as a finite number, coercing anything else to 0.0."""
    value = parse_decimal(text)
    return value if math.isfinite(value) else 0.0


def format_number(value: float) -> str:
    """
    Render a number in its minimal default string form.

    Integral values drop the fractional part ("3"), fixed notation is used
    from 1e-6 up to 1e21 and exponent notation outside it ("1e-7", "1e+21").
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if 1e-6 <= abs(value) < 1e21:
        text = format(Decimal(repr(value)), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text
    return _EXPONENT_PADDING.sub(r"e\1\2", repr(value))


def round_half_away(value: float, places: int = 0) -> float:
    """Round value to places decimals, ties away from zero; NaN and infinities pass through."""
    if not math.isfinite(value):
        return value
    return float(_quantize(value, places))


def format_fixed(value: float, places: int = 2) -> str:
    """
    Render value with exactly places decimals.

    Rounds the exact binary value half away from zero, so 1.005 renders
    as "1.00" and 0.125 as "0.13". Magnitudes of 1e21 and above keep
    their minimal form ("1e+21").
    """
    if not math.isfinite(value) or abs(value) >= 1e21:
        return format_number(value)
    return format(_quantize(value, places), "f")


def _quantize(value: float, places: int) -> Decimal:
    exponent = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        # wide enough for every integer digit of the largest float
        ctx.prec = 310 + places
        # "+ 0.0" folds negative zero into zero
        return Decimal(value + 0.0).quantize(exponent, rounding=ROUND_HALF_UP)


def is_in_progress_decimal(raw_input: str) -> bool:
    """
    Check whether raw_input looks like a decimal still being typed.

    True for input ending in "." ("12.") and for input ending in "0"
    that already has a decimal point ("12.0", "12.50").
    """
    if not raw_input:
        return False
    last = raw_input[-1]
    return last == "." or (last == "0" and "." in raw_input)


def normalize_field(current_value: str, raw_input: str, field: str) -> str:
    """
    Normalize a single edited line-item field.

    Descriptions are free text and stored verbatim. Numeric fields keep
    in-progress decimals untouched; anything else is reparsed, with
    unparseable, zero or non-finite input collapsing to "0".

    Args:
        current_value: Value stored before the edit. Numeric normalization
            depends only on the new input.
        raw_input: Text typed by the user.
        field: Line-item field name ("description", "quantity", "rate"
            or "tax_percent").

    Returns:
        The value to store.
    """
    if field == "description":
        return raw_input
    if is_in_progress_decimal(raw_input):
        return raw_input
    number = parse_decimal(raw_input)
    if not number or not math.isfinite(number):
        return "0"
    return format_number(number)


def parse_date(date_str: str | None) -> datetime | None:
    """
    Parse a date string in any of the formats the editor produces or accepts.

    Tries "Jan 05, 2024" first (the display format), then m/d/Y, m/d/y and
    finally ISO format.

    Returns:
        datetime object if parsing succeeds, None otherwise
    """
    if date_str:
        date_str = date_str.strip()
    if not date_str:
        return None

    for pattern in (DATE_FORMAT, "%m/%d/%Y", "%m/%d/%y"):
        try:
            return datetime.strptime(date_str, pattern)
        except ValueError:
            pass

    try:
        return datetime.fromisoformat(date_str)
    except (ValueError, TypeError):
        pass

    return None


def format_date(value: date) -> str:
    """Format a date for display, e.g. 'Jan 05, 2024'."""
    return value.strftime(DATE_FORMAT)


def resolve_invoice_date(invoice: "Invoice", today: date | None = None) -> date:
    """Return the invoice date, defaulting to today when unset or unreadable."""
    parsed = parse_date(invoice.invoice_date)
    if parsed:
        return parsed.date()
    return today or date.today()


def resolve_due_date(invoice: "Invoice", today: date | None = None) -> date:
    """Return the due date, defaulting to 30 days after the invoice date."""
    parsed = parse_date(invoice.invoice_due_date)
    if parsed:
        return parsed.date()
    return resolve_invoice_date(invoice, today) + DUE_DATE_OFFSET
