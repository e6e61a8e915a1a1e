"""
Line-item table component for Reflex.

Renders the column headings, one editable row per line item with its
computed amount, and the add-row button.
"""

import reflex as rx

from invoice_editor.components.invoice_form import text_input
from invoice_editor.state import InvoiceEditorState


def line_items_table() -> rx.Component:
    """
    Build the line-item table.

    Returns:
        The table component with header, rows and add button.
    """
    return rx.box(
        rx.box(
            _heading("product_line_description", "w-48", "white bold"),
            _heading("product_line_quantity", "w-17", "white bold right"),
            _heading("product_line_quantity_rate", "w-17", "white bold right"),
            _heading("product_line_quantity_amount", "w-17", "white bold right"),
            _heading("product_line_gst", "w-17", "white bold right"),
            class_name="mt-30 bg-blue flex",
        ),
        rx.foreach(InvoiceEditorState.line_rows, _line_item_row),
        rx.button(
            rx.icon("plus", size=16),
            "Add Line Item",
            on_click=InvoiceEditorState.add_line_item,
            class_name="link",
        ),
        class_name="line-items",
    )


def _heading(field: str, width: str, class_name: str) -> rx.Component:
    """Build an editable column heading."""
    return rx.box(text_input(field, "", class_name), class_name=f"{width} p-4-8")


def _line_item_row(row: dict, index: int) -> rx.Component:
    """Build an editable row for the line item at index."""
    return rx.box(
        rx.box(
            rx.text_area(
                value=row["description"],
                placeholder="Enter item name/description",
                rows="2",
                on_change=lambda value: InvoiceEditorState.set_line_item(
                    index, "description", value
                ),
                class_name="editable dark",
            ),
            class_name="w-48",
        ),
        _number_cell(row, index, "quantity"),
        _number_cell(row, index, "rate"),
        rx.box(rx.text(row["amount"], class_name="dark right"), class_name="w-17"),
        _number_cell(row, index, "tax_percent"),
        rx.button(
            rx.icon("x", size=14),
            on_click=lambda: InvoiceEditorState.remove_line_item(index),
            class_name="link row__remove",
            title="Remove Row",
        ),
        class_name="row flex",
    )


def _number_cell(row: dict, index: int, field: str) -> rx.Component:
    return rx.box(
        rx.input(
            value=row[field],
            on_change=lambda value: InvoiceEditorState.set_line_item(
                index, field, value
            ),
            class_name="editable dark right",
        ),
        class_name="w-17",
    )
