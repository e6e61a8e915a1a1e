"""
Abstract base class defining the invoice persistence contract.

The editor keeps exactly one document in an opaque key-value byte store.
Implementations only provide raw byte access; encoding, decoding and the
failure policy live here so every backend behaves the same:

- load() never raises: absent or corrupt data reads as None
- save() is fire-and-forget: failures are logged and dropped

Implementations:
- MemoryInvoiceStore: In-process dict, for tests and demos
- DiskInvoiceStore: diskcache directory that survives restarts
"""

from abc import ABC, abstractmethod

from invoice_editor.lib import logs
from invoice_editor.models.invoice import (
    STORAGE_KEY,
    Invoice,
    invoice_from_bytes,
    invoice_to_bytes,
)

LOG = logs.logger(__file__)


class InvoiceStore(ABC):
    """
    Abstract base class for invoice persistence.

    Subclasses must implement read_bytes() and write_bytes().

    Attributes:
        key: Storage key the document is kept under.
    """

    def __init__(self, key: str = STORAGE_KEY) -> None:
        self.key = key

    @abstractmethod
    def read_bytes(self, key: str) -> bytes | None:
        """
        Return the bytes stored under key.

        Args:
            key: Storage key.

        Returns:
            The stored bytes, or None when nothing is stored.
        """

    @abstractmethod
    def write_bytes(self, key: str, data: bytes) -> None:
        """
        Store data under key, replacing any previous value.

        Args:
            key: Storage key.
            data: Encoded document.
        """

    def load(self) -> Invoice | None:
        """
        Read the saved invoice.

        Returns:
            The saved Invoice, or None if nothing usable is stored.
        """
        try:
            data = self.read_bytes(self.key)
        except Exception as e:
            LOG.warning("Failed to read saved invoice: %s", e, exc_info=True)
            return None
        invoice = invoice_from_bytes(data)
        if invoice is not None:
            LOG.info(
                "Loaded saved invoice with %d line items", len(invoice.line_items)
            )
        return invoice

    def save(self, invoice: Invoice) -> None:
        """Write invoice to the store, logging instead of raising on failure."""
        try:
            self.write_bytes(self.key, invoice_to_bytes(invoice))
        except Exception as e:
            LOG.warning("Failed to save invoice: %s", e, exc_info=True)
