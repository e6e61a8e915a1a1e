"""
Reflex state management for the Invoice Editor application.

This module contains the editor state class. Each session reads the saved
document once into an InvoiceController, which writes every change back to
the store. Event handlers turn UI events into edit intents and run them
through that controller. Line rows and dates are computed vars of the
serialized document; totals are copied from the controller only after
line-item edits.
"""

import math
import os
from datetime import date

import reflex as rx

from invoice_editor.controller import InvoiceController
from invoice_editor.derivation import format_line_amount
from invoice_editor.lib import logs
from invoice_editor.models.edits import (
    LINE_ITEM_EDITS,
    AddLineItem,
    InvoiceEdit,
    LineItemField,
    RemoveLineItem,
    SetLineItemField,
    SetTextField,
    SetWidthField,
    TextField,
    WidthField,
)
from invoice_editor.models.invoice import (
    TEXT_FIELDS,
    deserialize_invoice,
    serialize_invoice,
)
from invoice_editor.models.totals import ZERO_TOTALS
from invoice_editor.services import get_invoice_store
from invoice_editor.utils import (
    format_date,
    format_number,
    parse_decimal,
    resolve_due_date,
    resolve_invoice_date,
)

LOG = logs.logger(__file__)

# Branding configuration
USE_GENERIC_BRANDING = os.getenv("INVOICE_EDITOR_GENERIC", "false").lower() in {
    "1",
    "true",
    "yes",
}
APP_TITLE = "Invoice Editor" if USE_GENERIC_BRANDING else "GST Invoice Generator"
APP_SUBTITLE = (
    "Fill out an invoice; every change is saved."
    if USE_GENERIC_BRANDING
    else "Fill out a GST invoice with per-line tax. Every change is saved."
)


def _get_store():
    """Get the configured invoice store (lazy loaded)."""
    return get_invoice_store()


class InvoiceEditorState(rx.State):
    """
    Main application state for the Invoice Editor.

    Holds the serialized document and the formatted totals. The session's
    InvoiceController is a backend-only var built once from the store; it
    saves every change and decides when the totals are re-derived.
    """

    document: dict = {}
    totals: dict[str, str] = ZERO_TOTALS.format()
    is_loaded: bool = False

    _controller: InvoiceController | None = None

    @rx.var
    def text_fields(self) -> dict[str, str]:
        """Scalar string fields keyed by attribute name."""
        invoice = deserialize_invoice(self.document)
        return {name: getattr(invoice, name) for name in TEXT_FIELDS}

    @rx.var
    def logo_width(self) -> str:
        """Logo width as text for the width input."""
        return format_number(deserialize_invoice(self.document).logo_width)

    @rx.var
    def line_rows(self) -> list[dict[str, str]]:
        """Line items with their 2-decimal amounts, in order."""
        invoice = deserialize_invoice(self.document)
        return [
            {
                "description": item.description,
                "quantity": item.quantity,
                "rate": item.rate,
                "tax_percent": item.tax_percent,
                "amount": format_line_amount(item),
            }
            for item in invoice.line_items
        ]

    @rx.var
    def invoice_date_display(self) -> str:
        """Invoice date, defaulting to today."""
        invoice = deserialize_invoice(self.document)
        return format_date(resolve_invoice_date(invoice, date.today()))

    @rx.var
    def due_date_display(self) -> str:
        """Due date, defaulting to 30 days after the invoice date."""
        invoice = deserialize_invoice(self.document)
        return format_date(resolve_due_date(invoice, date.today()))

    @rx.event
    def on_load(self):
        """Event handler for initial page load: read the saved document once."""
        if self.is_loaded:
            return
        controller = self._load_controller()
        LOG.info(
            "Editor loaded with %d line items", len(controller.invoice.line_items)
        )

    @rx.event
    def set_text(self, field: str, value: str):
        """Event handler for scalar text inputs."""
        self._apply(SetTextField(TextField(field), value))

    @rx.event
    def set_logo_width(self, value: str):
        """Event handler for the logo width input; non-numbers are ignored."""
        width = parse_decimal(value)
        if math.isfinite(width):
            self._apply(SetWidthField(WidthField.LOGO_WIDTH, width))

    @rx.event
    def set_line_item(self, index: int, field: str, value: str):
        """Event handler for a line-item cell."""
        self._apply(SetLineItemField(int(index), LineItemField(field), value))

    @rx.event
    def add_line_item(self):
        """Event handler for the add row button."""
        self._apply(AddLineItem())

    @rx.event
    def remove_line_item(self, index: int):
        """Event handler for a row's remove button."""
        self._apply(RemoveLineItem(int(index)))

    def _load_controller(self) -> InvoiceController:
        """Build the session controller from the store and show its document."""
        controller = InvoiceController.from_store(_get_store())
        self._controller = controller
        self.document = serialize_invoice(controller.invoice)
        self.totals = controller.totals.format()
        self.is_loaded = True
        return controller

    def _apply(self, edit: InvoiceEdit) -> None:
        """Run edit through the session controller and publish the result."""
        controller = self._controller or self._load_controller()
        previous = controller.invoice
        updated = controller.apply(edit)
        if updated is previous:
            return
        self.document = serialize_invoice(updated)
        if isinstance(edit, LINE_ITEM_EDITS):
            self.totals = controller.totals.format()
