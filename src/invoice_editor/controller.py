"""
Document state controller for the Invoice Editor.

This module owns the rules for changing an invoice document:

- Pure edit functions (set_field, set_line_item_field, add_line_item,
  remove_line_item) that return a new Invoice and never touch their input
- InvoiceController, which holds the authoritative snapshot, keeps the
  derived totals in step with the line items and notifies listeners

Each edit runs to completion (normalize, rebuild, derive, notify) before
the next one is accepted. Listeners run synchronously, once per successful
edit; rejected edits leave the snapshot alone and notify nobody.
"""

from dataclasses import replace
from typing import TYPE_CHECKING, Any, Callable

from invoice_editor.derivation import derive_totals
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
    BLANK_LINE_ITEM,
    LINE_ITEMS_FIELD,
    TEXT_FIELDS,
    WIDTH_FIELDS,
    Invoice,
    default_invoice,
    is_width_value,
)
from invoice_editor.models.totals import DerivedTotals
from invoice_editor.utils import normalize_field

if TYPE_CHECKING:
    from invoice_editor.services.invoice_store import InvoiceStore

LOG = logs.logger(__file__)

Listener = Callable[[Invoice], None]


def _field_name(field: Any) -> str:
    """Return the attribute name for a field enum member or plain name."""
    return str(getattr(field, "value", field))


def set_field(invoice: Invoice, field_name: str, value: Any) -> Invoice:
    """
    Replace a single scalar field.

    Width fields only take numbers and every other field only takes
    strings. Addressing line_items, an unknown field, or a value of the
    wrong type returns the invoice unchanged.

    Args:
        invoice: Current snapshot.
        field_name: Invoice attribute name (or TextField/WidthField member).
        value: New value.

    Returns:
        A new Invoice, or the same object when the edit was rejected.
    """
    name = _field_name(field_name)
    if name == LINE_ITEMS_FIELD:
        LOG.debug("Rejected set_field on %s; use the line item edits", name)
        return invoice
    if name in WIDTH_FIELDS:
        accepted = is_width_value(value)
    elif name in TEXT_FIELDS:
        accepted = isinstance(value, str)
    else:
        LOG.debug("Rejected set_field on unknown field %s", name)
        return invoice
    if not accepted:
        LOG.debug(
            "Rejected set_field on %s: %s value", name, type(value).__name__
        )
        return invoice
    return replace(invoice, **{name: value})


def set_line_item_field(
    invoice: Invoice, index: int, field: LineItemField | str, raw_value: str
) -> Invoice:
    """
    Normalize raw_value and store it in one field of the line item at index.

    All other line items are carried over unchanged and in order. The index
    must address an existing line item.
    """
    line_field = LineItemField(field)
    current = invoice.line_items[index]
    value = normalize_field(
        getattr(current, line_field.value), raw_value, line_field.value
    )
    line_items = tuple(
        replace(item, **{line_field.value: value}) if i == index else item
        for i, item in enumerate(invoice.line_items)
    )
    return replace(invoice, line_items=line_items)


def add_line_item(invoice: Invoice) -> Invoice:
    """Append a blank line item to the end of the sequence."""
    return replace(invoice, line_items=invoice.line_items + (BLANK_LINE_ITEM,))


def remove_line_item(invoice: Invoice, index: int) -> Invoice:
    """Drop the line item at index; an index with no item removes nothing."""
    line_items = tuple(
        item for i, item in enumerate(invoice.line_items) if i != index
    )
    return replace(invoice, line_items=line_items)


def apply_edit(invoice: Invoice, edit: InvoiceEdit) -> Invoice:
    """
    Apply one edit intent to invoice.

    Raises:
        TypeError: If edit is not one of the known edit operations.
    """
    if isinstance(edit, SetTextField):
        return set_field(invoice, TextField(edit.field).value, edit.value)
    if isinstance(edit, SetWidthField):
        return set_field(invoice, WidthField(edit.field).value, edit.value)
    if isinstance(edit, SetLineItemField):
        return set_line_item_field(invoice, edit.index, edit.field, edit.value)
    if isinstance(edit, AddLineItem):
        return add_line_item(invoice)
    if isinstance(edit, RemoveLineItem):
        return remove_line_item(invoice, edit.index)
    raise TypeError(f"Unknown invoice edit: {edit!r}")


class InvoiceController:
    """
    Holds the authoritative invoice snapshot and its derived totals.

    The snapshot is replaced, never modified, so callers holding an older
    Invoice keep a consistent view. Totals are derived at construction and
    again after every edit that touches the line items.

    Attributes:
        invoice: Current snapshot.
        totals: Totals derived from the current line items.
    """

    def __init__(
        self,
        invoice: Invoice | None = None,
        listeners: list[Listener] | None = None,
    ) -> None:
        """
        Initialize with a starting document.

        Args:
            invoice: Starting snapshot, or None for the default template.
            listeners: Callables notified with every new snapshot.
        """
        self._invoice = invoice if invoice is not None else default_invoice()
        self._totals = derive_totals(self._invoice.line_items)
        self._listeners: list[Listener] = list(listeners or [])

    @classmethod
    def from_store(cls, store: "InvoiceStore") -> "InvoiceController":
        """
        Load the saved document from store and save every change back to it.

        Falls back to the default template when nothing usable is stored.
        """
        invoice = store.load()
        if invoice is None:
            LOG.info("No saved invoice found; starting from the default template")
        return cls(invoice, listeners=[store.save])

    @property
    def invoice(self) -> Invoice:
        """Return the current snapshot."""
        return self._invoice

    @property
    def totals(self) -> DerivedTotals:
        """Return the totals derived from the current line items."""
        return self._totals

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a change listener.

        Returns:
            A callable that removes the listener again.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def apply(self, edit: InvoiceEdit) -> Invoice:
        """
        Apply an edit, re-derive totals if needed and notify listeners.

        Returns:
            The current snapshot after the edit.
        """
        updated = apply_edit(self._invoice, edit)
        if updated is self._invoice:
            return self._invoice

        self._invoice = updated
        if isinstance(edit, LINE_ITEM_EDITS):
            self._totals = derive_totals(updated.line_items)
        LOG.debug("Applied %s", edit)

        for listener in list(self._listeners):
            listener(updated)
        return updated

    def set_field(self, field: TextField | WidthField | str, value: Any) -> Invoice:
        """
        Replace a scalar field by name.

        Width names are routed to a width edit. line_items and unknown names
        are rejected: the snapshot is returned unchanged and nobody is
        notified.
        """
        name = _field_name(field)
        if name in WIDTH_FIELDS:
            return self.apply(SetWidthField(WidthField(name), value))
        if name in TEXT_FIELDS:
            return self.apply(SetTextField(TextField(name), value))
        LOG.debug("Rejected set_field on %s", name)
        return self._invoice

    def set_width(self, field: WidthField | str, value: int | float) -> Invoice:
        """Replace a numeric width field; other names are rejected."""
        name = _field_name(field)
        if name not in WIDTH_FIELDS:
            LOG.debug("Rejected set_width on %s", name)
            return self._invoice
        return self.apply(SetWidthField(WidthField(name), value))

    def set_line_item_field(
        self, index: int, field: LineItemField | str, raw_value: str
    ) -> Invoice:
        """Normalize and store one field of the line item at index."""
        return self.apply(SetLineItemField(index, LineItemField(field), raw_value))

    def add_line_item(self) -> Invoice:
        """Append a blank line item."""
        return self.apply(AddLineItem())

    def remove_line_item(self, index: int) -> Invoice:
        """Remove the line item at index, if present."""
        return self.apply(RemoveLineItem(index))
