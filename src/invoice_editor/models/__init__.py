"""
Data models and serialization helpers for the Invoice Editor.

This package provides:
- The invoice document (Invoice, LineItem) and its default template
- Derived totals (DerivedTotals), recomputed and never persisted
- Edit intents (SetTextField, SetLineItemField, ...) applied by the controller
- Serialization to the flat JSON form kept in the key-value store

All models are frozen dataclasses; a change always produces a new object.
"""

from invoice_editor.models.edits import (
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
    BLANK_LINE_ITEM,
    STORAGE_KEY,
    Invoice,
    LineItem,
    default_invoice,
    deserialize_invoice,
    invoice_from_bytes,
    invoice_to_bytes,
    serialize_invoice,
)
from invoice_editor.models.totals import ZERO_TOTALS, DerivedTotals

__all__ = [
    "AddLineItem",
    "BLANK_LINE_ITEM",
    "DerivedTotals",
    "Invoice",
    "InvoiceEdit",
    "LineItem",
    "LineItemField",
    "RemoveLineItem",
    "STORAGE_KEY",
    "SetLineItemField",
    "SetTextField",
    "SetWidthField",
    "TextField",
    "WidthField",
    "ZERO_TOTALS",
    "default_invoice",
    "deserialize_invoice",
    "invoice_from_bytes",
    "invoice_to_bytes",
    "serialize_invoice",
]
