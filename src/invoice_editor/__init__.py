"""
Invoice Editor: a Reflex application for filling out GST invoices.

The user edits party details, a variable-length list of line items and
the invoice labels; totals are derived from the line items on every change
and the document is saved to a key-value store after each edit.

Subpackages:
- models: Invoice document, derived totals, edit intents, serialization
- services: Persistence (memory and disk-backed invoice stores)
- components: Reflex UI components
- lib: Logging, JSON and disk cache helpers
- utils: Decimal normalization, number and date formatting

Core modules:
- derivation: derive_totals() over the ordered line items
- controller: Edit functions and InvoiceController

Main entry points:
- app.main(): Start the development server
- app.app: The Reflex application instance
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
