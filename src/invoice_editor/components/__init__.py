"""
Reflex UI components for the Invoice Editor.

- invoice_form: Header, party, meta and footer inputs
- line_items: Editable line-item table with add/remove
- totals_panel: Read-only derived totals with editable labels

Components only read state vars and send edit events; they never compute
totals themselves.
"""

from invoice_editor.components.invoice_form import (
    client_section,
    company_section,
    footer_section,
)
from invoice_editor.components.line_items import line_items_table
from invoice_editor.components.totals_panel import totals_panel

__all__ = [
    "client_section",
    "company_section",
    "footer_section",
    "line_items_table",
    "totals_panel",
]
