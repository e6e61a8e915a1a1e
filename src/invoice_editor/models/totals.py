"""
Derived invoice totals.

DerivedTotals is recomputed from the line items on every change and is
never stored in the invoice document or edited directly.
"""

from dataclasses import dataclass

from invoice_editor.utils import format_fixed


@dataclass(frozen=True, slots=True)
class DerivedTotals:
    """
    Figures derived from the ordered line items.

    Attributes:
        sub_total: Sum of unrounded line amounts.
        tax_total: Sum of per-line tax. Shown twice on the invoice (SGST and
            CGST rows) and counted twice in the grand total.
        rounding_adjustment: Fractional part, to 2 decimals, of
            sub_total + 2 * tax_total.
        grand_total: sub_total + 2 * tax_total rounded to a whole number.
    """

    sub_total: float = 0.0
    tax_total: float = 0.0
    rounding_adjustment: float = 0.0
    grand_total: float = 0.0

    def format(self) -> dict[str, str]:
        """Return the display strings for the totals panel."""
        tax = format_fixed(self.tax_total, 2)
        return {
            "sub_total": format_fixed(self.sub_total, 2),
            "sgst": tax,
            "cgst": tax,
            "round": format_fixed(self.rounding_adjustment, 2),
            "total": format_fixed(self.grand_total, 0),
        }


ZERO_TOTALS = DerivedTotals()
