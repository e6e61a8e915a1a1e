"""Derivation engine: tests for line amounts and invoice totals.

Invariants:
    - sub_total is the sum of unrounded line amounts
    - tax_total is the sum of per-line amount * tax_percent / 100
    - grand_total == round(sub_total + 2 * tax_total) to a whole number
    - rounding_adjustment is the 2-decimal fraction of sub_total + 2 * tax_total
    - Lines with an unreadable or zero quantity/rate add nothing anywhere
    - Products and sums that overflow count as zero; totals are always finite
"""

import math

import pytest

from invoice_editor.controller import InvoiceController
from invoice_editor.derivation import (
    derive_totals,
    format_line_amount,
    line_amount,
    line_tax,
    rounding_fraction,
)
from invoice_editor.models.invoice import Invoice, LineItem
from invoice_editor.models.totals import ZERO_TOTALS, DerivedTotals
from invoice_editor.utils import round_half_away


def _item(quantity: str, rate: str, tax_percent: str = "0") -> LineItem:
    return LineItem(quantity=quantity, rate=rate, tax_percent=tax_percent)


# -- line_amount ---------------------------------------------------------------

def test_line_amount_multiplies_quantity_and_rate():
    assert line_amount(_item("2", "100.00")) == 200.0
    assert line_amount(_item("1.5", "3")) == 4.5


@pytest.mark.parametrize(
    ("quantity", "rate"),
    [("0", "100"), ("3", "0"), ("abc", "10"), ("2", ""), ("Infinity", "5"), ("3.", "0.0")],
)
def test_line_amount_is_zero_for_unusable_numbers(quantity, rate):
    assert line_amount(_item(quantity, rate)) == 0.0


def test_line_amount_accepts_in_progress_text():
    assert line_amount(_item("3.", "2.50")) == 7.5


def test_format_line_amount_has_two_decimals():
    assert format_line_amount(_item("2", "100")) == "200.00"
    assert format_line_amount(_item("3", "33.333")) == "100.00"
    assert format_line_amount(_item("0", "5")) == "0.00"


def test_line_tax_uses_the_line_percentage():
    assert line_tax(_item("1", "200", "5")) == pytest.approx(10.0)
    assert line_tax(_item("1", "200", "n/a")) == 0.0


# -- derive_totals -------------------------------------------------------------

def test_empty_sequence_is_all_zero():
    totals = derive_totals([])
    assert totals == ZERO_TOTALS
    assert totals.grand_total == 0


def test_gst_scenario(gst_invoice):
    totals = derive_totals(gst_invoice.line_items)

    assert [line_amount(item) for item in gst_invoice.line_items] == [200.0, 50.0]
    assert totals.sub_total == pytest.approx(250.0)
    assert totals.tax_total == pytest.approx(36.0)
    assert totals.grand_total == 322
    assert totals.rounding_adjustment == pytest.approx(0.0)


def test_zero_quantity_line_contributes_nothing_even_with_tax():
    totals = derive_totals([_item("0", "100", "18"), _item("1", "10", "0")])
    assert totals.sub_total == 10.0
    assert totals.tax_total == 0.0
    assert totals.grand_total == 10


def test_tax_percent_is_per_line():
    totals = derive_totals([_item("1", "100", "10"), _item("1", "100", "20")])
    assert totals.tax_total == pytest.approx(30.0)
    assert totals.grand_total == 260


def test_grand_total_counts_tax_twice():
    totals = derive_totals([_item("1", "100", "5")])
    assert totals.tax_total == pytest.approx(5.0)
    assert totals.grand_total == 110


def test_grand_total_rounds_half_away_from_zero():
    assert derive_totals([_item("1", "0.5")]).grand_total == 1
    assert derive_totals([_item("1", "2.5")]).grand_total == 3


def test_rounding_adjustment_is_fraction_of_running_total():
    totals = derive_totals([_item("1", "10.25")])
    assert totals.rounding_adjustment == pytest.approx(0.25)
    assert totals.grand_total == 10


def test_rounding_adjustment_comes_from_the_last_line():
    totals = derive_totals([_item("1", "0.4"), _item("1", "1.3")])
    assert totals.rounding_adjustment == pytest.approx(0.7)


def test_rounding_fraction_wraps_near_whole_units():
    assert rounding_fraction(0.996) == 0.0
    assert rounding_fraction(12.994) == pytest.approx(0.99)
    assert rounding_fraction(-0.25) == pytest.approx(0.75)


def test_totals_match_line_sums():
    items = [
        _item("3", "19.99", "12"),
        _item("abc", "5", "18"),
        _item("1.5", "200", "5"),
        _item("7", "0.35", "28"),
        _item("2", "19.99", "12"),
    ]
    totals = derive_totals(items)

    sub_total = sum(line_amount(item) for item in items)
    tax_total = sum(line_tax(item) for item in items)
    assert totals.sub_total == pytest.approx(sub_total)
    assert totals.tax_total == pytest.approx(tax_total)
    assert totals.grand_total == round_half_away(totals.sub_total + 2 * totals.tax_total)



# -- Overflow ------------------------------------------------------------------

def test_overflowing_line_is_worth_nothing():
    controller = InvoiceController(Invoice())
    controller.add_line_item()
    controller.set_line_item_field(0, "quantity", "1e200")
    controller.set_line_item_field(0, "rate", "1e200")

    item = controller.invoice.line_items[0]
    assert (item.quantity, item.rate) == ("1e+200", "1e+200")
    assert line_amount(item) == 0.0
    assert format_line_amount(item) == "0.00"
    assert controller.totals == ZERO_TOTALS


def test_overflowing_tax_counts_as_zero():
    item = _item("1e300", "1", "1e300")
    totals = derive_totals([item])
    assert line_tax(item) == 0.0
    assert totals.sub_total == 1e300
    assert totals.tax_total == 0.0
    assert totals.grand_total == 1e300
    assert totals.format()["total"] == "1e+300"


def test_overflowing_running_sum_counts_as_zero():
    totals = derive_totals([_item("1e308", "1"), _item("1e308", "1")])
    assert all(
        math.isfinite(value)
        for value in (
            totals.sub_total,
            totals.tax_total,
            totals.rounding_adjustment,
            totals.grand_total,
        )
    )
    assert totals.sub_total == 0.0


def test_large_finite_amounts_keep_their_value():
    item = _item("1e25", "1", "10")
    totals = derive_totals([item])
    assert format_line_amount(item) == "1e+25"
    assert totals.grand_total == pytest.approx(1.2e25)
    assert totals.format()["sub_total"] == "1e+25"


def test_rounding_fraction_of_non_finite_is_zero():
    assert rounding_fraction(math.inf) == 0.0
    assert rounding_fraction(math.nan) == 0.0


# -- DerivedTotals.format ------------------------------------------------------

def test_format_shows_tax_on_both_rows(gst_invoice):
    assert derive_totals(gst_invoice.line_items).format() == {
        "sub_total": "250.00",
        "sgst": "36.00",
        "cgst": "36.00",
        "round": "0.00",
        "total": "322",
    }


def test_format_of_zero_totals():
    assert DerivedTotals().format()["total"] == "0"
