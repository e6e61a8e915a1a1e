"""
Invoice derivation engine.

Computes line amounts and invoice totals from the ordered line items.
Everything here is a pure function of its input: no errors are raised and
numeric text that cannot be read counts as zero.

The grand total adds the single tax figure twice (once per SGST/CGST row),
so sub_total + tax_total + tax_total is the amount the invoice asks for.
"""

import math
from typing import Iterable

from invoice_editor.models.invoice import LineItem
from invoice_editor.models.totals import DerivedTotals
from invoice_editor.utils import format_fixed, round_half_away, to_number


def _finite(value: float) -> float:
    """Return value, or 0.0 when it overflowed to an infinity or NaN."""
    return value if math.isfinite(value) else 0.0


def line_amount(item: LineItem) -> float:
    """
    Return quantity x rate for a line, unrounded.

    Lines whose quantity or rate is unreadable, non-finite or zero are
    worth nothing, as are lines whose product overflows.
    """
    quantity = to_number(item.quantity)
    rate = to_number(item.rate)
    if quantity and rate:
        return _finite(quantity * rate)
    return 0.0


def format_line_amount(item: LineItem) -> str:
    """Return the line amount as shown in the Amount column (2 decimals)."""
    return format_fixed(line_amount(item), 2)


def line_tax(item: LineItem, amount: float | None = None) -> float:
    """Return the tax owed on a line at its own tax percentage."""
    if amount is None:
        amount = line_amount(item)
    return _finite(amount * (to_number(item.tax_percent) / 100))


def rounding_fraction(value: float) -> float:
    """
    Return the fractional part of value rounded to 2 decimals.

    A fraction that rounds up to a whole unit (0.995 and above) wraps to 0.
    Non-finite values have no fraction.
    """
    if not math.isfinite(value):
        return 0.0
    fraction = value - math.floor(value)
    return round_half_away(fraction, 2) % 1


def derive_totals(line_items: Iterable[LineItem]) -> DerivedTotals:
    """
    Derive the invoice totals in one left-to-right pass.

    The rounding adjustment is refreshed after every line from the running
    sub_total + 2 * tax_total, so the value left by the last line is the one
    reported. An empty sequence yields all zeros. A running sum that
    overflows counts as zero.

    Args:
        line_items: Line items in presentation order.

    Returns:
        DerivedTotals for the sequence.
    """
    sub_total = 0.0
    tax_total = 0.0
    rounding_adjustment = 0.0

    for item in line_items:
        amount = line_amount(item)
        tax_total = _finite(tax_total + line_tax(item, amount))
        sub_total = _finite(sub_total + amount)
        rounding_adjustment = rounding_fraction(sub_total + tax_total + tax_total)

    return DerivedTotals(
        sub_total=sub_total,
        tax_total=tax_total,
        rounding_adjustment=rounding_adjustment,
        grand_total=round_half_away(_finite(sub_total + tax_total + tax_total), 0),
    )
