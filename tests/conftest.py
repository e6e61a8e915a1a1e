"""Root conftest: shared fixtures and test configuration."""

import os

import pytest

# Never let tests write into the shared temp-dir store
os.environ.setdefault("INVOICE_EDITOR_STORE", "memory")

from invoice_editor.models.invoice import Invoice, LineItem  # noqa: E402
from invoice_editor.services.invoice_store_memory import MemoryInvoiceStore  # noqa: E402


@pytest.fixture
def store() -> MemoryInvoiceStore:
    return MemoryInvoiceStore()


@pytest.fixture
def gst_invoice() -> Invoice:
    """Two-line invoice: 2 x 100.00 at 18% and 1 x 50 at 0%."""
    return Invoice(
        company_name="Acme Traders",
        client_name="Ravi",
        currency="INR",
        line_items=(
            LineItem(description="Widget", quantity="2", rate="100.00", tax_percent="18"),
            LineItem(description="Service", quantity="1", rate="50", tax_percent="0"),
        ),
    )
