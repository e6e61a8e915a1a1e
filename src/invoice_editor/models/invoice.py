"""
Invoice document models and serialization helpers.

This module defines the editable invoice document. The hierarchy is flat:

    Invoice
    ├── scalar label/value fields (company, client, meta, labels, footer)
    ├── logo_width (the only numeric, width-typed field)
    └── LineItem[] (description, quantity, rate, tax percent)

Line-item numbers are kept as the text the user typed (decimal strings)
so that in-progress input such as "12." survives a round trip. Derived
totals are never part of the document.

The serialized form is a flat camelCase JSON object with a single
`lineItems` array. There is no schema version: any field that is missing
or has the wrong type falls back to the default template.
"""

import math
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping, Sequence

from benedict import benedict

from invoice_editor.lib import logs, objects
from invoice_editor.utils import format_number

LOG = logs.logger(__file__)

STORAGE_KEY = "invoiceData"
LINE_ITEMS_FIELD = "line_items"

# Wire names that do not follow the plain snake_case -> camelCase rule.
_WIRE_NAMES = {
    "invoice_gstin_label": "invoiceGSTINLabel",
    "invoice_gstin": "invoiceGSTIN",
    "product_line_gst": "productLineGST",
    "line_items": "lineItems",
}
_LEGACY_LINE_ITEMS_KEY = "productLines"
_LEGACY_TAX_PERCENT_KEY = "gst"


@dataclass(frozen=True, slots=True)
class LineItem:
    """One invoice row: quantity x rate with its own tax percentage."""

    description: str = ""
    quantity: str = "0"
    rate: str = "0.00"
    tax_percent: str = "0"


BLANK_LINE_ITEM = LineItem()


@dataclass(frozen=True, slots=True)
class Invoice:
    """
    Immutable snapshot of the invoice document.

    Edits never modify an Invoice; they build a new one with
    dataclasses.replace and a new line_items tuple.
    """

    logo: str = ""
    logo_width: int | float = 100
    title: str = ""

    company_name: str = ""
    name: str = ""
    phone: str = ""
    mail: str = ""
    company_address: str = ""
    company_address2: str = ""
    company_country: str = ""

    bill_to: str = ""
    client_name: str = ""
    client_phone: str = ""
    client_mail: str = ""
    client_address: str = ""
    client_address2: str = ""
    client_country: str = ""

    invoice_title_label: str = ""
    invoice_title: str = ""
    invoice_gstin_label: str = ""
    invoice_gstin: str = ""
    invoice_date_label: str = ""
    invoice_date: str = ""
    invoice_due_date_label: str = ""
    invoice_due_date: str = ""

    product_line_description: str = ""
    product_line_quantity: str = ""
    product_line_quantity_rate: str = ""
    product_line_quantity_amount: str = ""
    product_line_gst: str = ""

    line_items: tuple[LineItem, ...] = field(default_factory=tuple)

    sub_total_label: str = ""
    sgst_label: str = ""
    cgst_label: str = ""
    round_label: str = ""
    total_label: str = ""
    currency: str = ""

    notes_label: str = ""
    notes: str = ""
    term_label: str = ""
    term: str = ""
    pay_label: str = ""
    pay: str = ""


WIDTH_FIELDS = frozenset({"logo_width"})
TEXT_FIELDS = frozenset(
    f.name
    for f in fields(Invoice)
    if f.name not in WIDTH_FIELDS and f.name != LINE_ITEMS_FIELD
)
LINE_ITEM_FIELDS = tuple(f.name for f in fields(LineItem))
NUMERIC_LINE_ITEM_FIELDS = frozenset({"quantity", "rate", "tax_percent"})


def default_invoice() -> Invoice:
    """Return the empty invoice template shown to a first-time user."""
    return Invoice(
        title="INVOICE",
        bill_to="Bill To:",
        invoice_title_label="Invoice#",
        invoice_gstin_label="GSTIN",
        invoice_date_label="Invoice Date",
        invoice_due_date_label="Due Date",
        product_line_description="Item Description",
        product_line_quantity="Qty",
        product_line_quantity_rate="Rate",
        product_line_quantity_amount="Amount",
        product_line_gst="GST %",
        line_items=(BLANK_LINE_ITEM, BLANK_LINE_ITEM),
        sub_total_label="Sub Total",
        sgst_label="SGST",
        cgst_label="CGST",
        round_label="Round Off",
        total_label="TOTAL",
        currency="INR",
        notes_label="Notes",
        term_label="Terms & Conditions",
        pay_label="Payment Details",
    )


def is_width_value(value: Any) -> bool:
    """Return True for values a width-typed field accepts (finite numbers, not bools)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def wire_name(name: str) -> str:
    """Return the serialized key for a dataclass field name."""
    if name in _WIRE_NAMES:
        return _WIRE_NAMES[name]
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def serialize_line_item(item: LineItem) -> dict:
    """Convert a LineItem into a JSON serializable dictionary."""
    return {wire_name(name): getattr(item, name) for name in LINE_ITEM_FIELDS}


def serialize_invoice(invoice: Invoice) -> dict:
    """Convert an Invoice into a flat JSON serializable dictionary."""
    data: dict[str, Any] = {}
    for f in fields(Invoice):
        if f.name == LINE_ITEMS_FIELD:
            data[wire_name(f.name)] = [
                serialize_line_item(item) for item in invoice.line_items
            ]
        else:
            data[wire_name(f.name)] = getattr(invoice, f.name)
    return data


def deserialize_line_item(payload: Mapping[str, Any]) -> LineItem:
    """
    Convert a dictionary into a LineItem, defaulting unusable fields.

    Strings are kept as typed. Finite numbers written by other tools are converted
    to their decimal string; anything else falls back to the blank item.
    """
    b = benedict(payload, keypath_separator=None)
    values: dict[str, str] = {}
    for name in LINE_ITEM_FIELDS:
        raw = b.get(wire_name(name))
        if raw is None and name == "tax_percent":
            raw = b.get(_LEGACY_TAX_PERCENT_KEY)
        if isinstance(raw, str):
            values[name] = raw
        elif name in NUMERIC_LINE_ITEM_FIELDS and is_width_value(raw):
            values[name] = format_number(raw)
    return replace(BLANK_LINE_ITEM, **values)


def deserialize_invoice(payload: Mapping[str, Any]) -> Invoice:
    """
    Convert a dictionary back into an Invoice.

    Never raises on shape mismatches: missing keys and values of the wrong
    type are replaced with the default template's values, and non-object
    entries in the line-item array are skipped.
    """
    b = benedict(payload, keypath_separator=None)
    template = default_invoice()
    values: dict[str, Any] = {}

    for name in TEXT_FIELDS:
        raw = b.get(wire_name(name))
        if isinstance(raw, str):
            values[name] = raw
    for name in WIDTH_FIELDS:
        raw = b.get(wire_name(name))
        if is_width_value(raw):
            values[name] = raw

    raw_items = b.get(wire_name(LINE_ITEMS_FIELD))
    if raw_items is None:
        raw_items = b.get(_LEGACY_LINE_ITEMS_KEY)
    if isinstance(raw_items, Sequence) and not isinstance(raw_items, str):
        values[LINE_ITEMS_FIELD] = tuple(
            deserialize_line_item(item)
            for item in raw_items
            if isinstance(item, Mapping)
        )

    return replace(template, **values)


def invoice_to_bytes(invoice: Invoice) -> bytes:
    """Encode an Invoice as UTF-8 JSON bytes for the key-value store."""
    return objects.to_json(serialize_invoice(invoice)).encode("utf-8")


def invoice_from_bytes(data: bytes | None) -> Invoice | None:
    """
    Decode bytes written by invoice_to_bytes.

    Returns:
        The Invoice, or None when data is empty, not UTF-8 JSON, or not a
        JSON object. Corruption is logged and never raised.
    """
    if not data:
        return None
    try:
        payload = objects.from_json(data.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as exc:
        LOG.warning("Discarding unreadable invoice data: %s", exc)
        return None
    if not isinstance(payload, Mapping):
        LOG.warning(
            "Discarding invoice data of type %s", type(payload).__name__
        )
        return None
    return deserialize_invoice(payload)
