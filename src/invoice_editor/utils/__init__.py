"""Utility functions shared across the invoice editor package."""

from invoice_editor.utils.invoice_helpers import (
    format_date,
    format_fixed,
    format_number,
    normalize_field,
    parse_date,
    parse_decimal,
    resolve_due_date,
    resolve_invoice_date,
    round_half_away,
    to_number,
)

__all__ = [
    "format_date",
    "format_fixed",
    "format_number",
    "normalize_field",
    "parse_date",
    "parse_decimal",
    "resolve_due_date",
    "resolve_invoice_date",
    "round_half_away",
    "to_number",
]
