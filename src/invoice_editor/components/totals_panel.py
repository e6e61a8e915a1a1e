"""
Totals panel component for Reflex.

Shows the derived subtotal, the tax figure on both the SGST and CGST rows,
the round-off figure and the grand total. Labels stay editable; numbers
are read-only.
"""

import reflex as rx

from invoice_editor.components.invoice_form import text_input
from invoice_editor.state import InvoiceEditorState


def totals_panel() -> rx.Component:
    """Build the totals block shown under the line items."""
    totals = InvoiceEditorState.totals
    return rx.box(
        _totals_row("sub_total_label", totals["sub_total"]),
        _totals_row("sgst_label", totals["sgst"]),
        _totals_row("cgst_label", totals["cgst"]),
        _totals_row("round_label", totals["round"]),
        rx.box(
            rx.box(text_input("total_label", "", "bold"), class_name="w-50 p-5"),
            rx.box(
                text_input("currency", "", "dark bold right ml-30"),
                rx.text(totals["total"], class_name="right bold dark w-auto"),
                class_name="w-50 p-5 flex",
            ),
            class_name="flex bg-light-green p-5",
        ),
        class_name="w-50 mt-20",
    )


def _totals_row(label_field: str, value) -> rx.Component:
    """Build a label/value row within the totals block."""
    return rx.box(
        rx.box(text_input(label_field), class_name="w-50 p-5"),
        rx.box(rx.text(value, class_name="right bold dark"), class_name="w-50 p-5"),
        class_name="flex",
    )
